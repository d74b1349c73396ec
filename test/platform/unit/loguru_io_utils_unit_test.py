import pytest

from src.platform.logging.loguru_io_utils import (
    MASK,
    MAX_CONTENT_LENGTH,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMaskSensitive:
    @pytest.mark.parametrize(
        'raw,expected',
        [
            ("{'token': 'eyJhbGciOi'}", f"{{'token': '{MASK}'}}"),
            ("password='hunter2'", f"password='{MASK}'"),
            ('Authorization="Bearer abc"', f'Authorization="{MASK}"'),
        ],
    )
    def test_masks_sensitive_values(self, raw: str, expected: str):
        assert mask_sensitive(raw) == expected

    def test_leaves_plain_data_untouched(self):
        data = {'user_id': 1, 'hotel_id': 2}

        assert mask_sensitive(data) is data

    @pytest.mark.parametrize('keyword', ['token', 'Password', 'AUTHORIZATION'])
    def test_should_mask_keyword(self, keyword: str):
        assert should_mask_keyword(keyword, 'secret') == MASK

    def test_should_not_mask_other_keyword(self):
        assert should_mask_keyword('user_id', 1) == 1


@pytest.mark.unit
class TestTruncateContent:
    def test_short_content_untouched(self):
        assert truncate_content('short') == 'short'

    def test_long_content_truncated(self):
        data = 'x' * (MAX_CONTENT_LENGTH + 10)

        truncated = truncate_content(data)

        assert truncated.startswith('x' * MAX_CONTENT_LENGTH)
        assert truncated.endswith(f'({MAX_CONTENT_LENGTH + 10} chars)')
