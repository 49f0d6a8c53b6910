from datetime import datetime

import pytest

from cms.utils.formatters import format_file_size, format_timestamp, render_markdown


@pytest.mark.parametrize('size_bytes, expected', [
    (0, '0 B'),
    (1023, '1023 B'),
    (1536, '1.5 KB'),
    (5 * 1024 * 1024, '5.0 MB'),
    (3 * 1024 ** 3, '3.00 GB'),
])
def test_format_file_size(size_bytes, expected):
    assert format_file_size(size_bytes) == expected


def test_format_timestamp():
    timestamp = 1_500_000_000
    expected = datetime.fromtimestamp(timestamp).strftime('%Y-%m-%d %H:%M:%S')

    assert format_timestamp(timestamp) == expected
    assert format_timestamp(None) == 'N/A'


def test_render_markdown():
    html = render_markdown('# Title\n\nSome *emphasis* here.')

    assert '<h1>Title</h1>' in html
    assert '<em>emphasis</em>' in html


def test_render_markdown_fenced_code():
    html = render_markdown('```\nprint("hi")\n```')

    assert '<code>' in html
