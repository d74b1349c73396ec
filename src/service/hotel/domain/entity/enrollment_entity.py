from datetime import date, datetime
from typing import Optional

import attrs


@attrs.define
class EnrollmentEntity:
    user_id: int
    name: str
    cpf: str = attrs.field(default='', repr=False)  # Personal document, keep out of logs
    birthday: Optional[date] = None
    phone: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
