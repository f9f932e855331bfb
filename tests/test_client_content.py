import pytest

from services.content import (
    filter_contents,
    infer_type,
    is_pdf,
    parse_tags,
    tweet_embed_html,
    youtube_video_id,
)


@pytest.mark.parametrize(
    "content, expected",
    [
        ({"type": "text", "link": "https://youtu.be/x"}, "text"),
        ({"link": "https://youtu.be/abc"}, "youtube"),
        ({"link": "https://www.youtube.com/watch?v=abc"}, "youtube"),
        ({"link": "https://x.com/someone/status/1"}, "twitter"),
        ({"link": "https://cdn.test/cat.JPG"}, "image"),
        ({"link": "https://files.test/paper.pdf?dl=1"}, "document"),
        ({"body": "just words"}, "text"),
        ({}, "youtube"),
    ],
)
def test_infer_type(content, expected):
    assert infer_type(content) == expected


@pytest.mark.parametrize(
    "link, expected",
    [
        ("https://youtu.be/abc123", "abc123"),
        ("https://www.youtube.com/watch?v=abc123&t=10", "abc123"),
        ("https://www.youtube.com/embed/abc123", "abc123"),
        ("https://www.youtube.com/shorts/abc123", "abc123"),
        ("https://vimeo.com/123", None),
        (None, None),
    ],
)
def test_youtube_video_id(link, expected):
    assert youtube_video_id(link) == expected


def test_filter_contents_by_type():
    contents = [
        {"id": 1, "type": "text", "body": "a"},
        {"id": 2, "link": "https://youtu.be/x"},
        {"id": 3, "type": "image", "link": "https://a.test/b.png"},
    ]

    assert [c["id"] for c in filter_contents(contents, "youtube")] == [2]
    assert [c["id"] for c in filter_contents(contents, None)] == [1, 2, 3]


def test_parse_tags():
    assert parse_tags(" ml, talks,, ml ,") == ["ml", "talks"]
    assert parse_tags(None) == []


@pytest.mark.parametrize(
    "content, expected",
    [
        ({"link": "https://a.test/paper.PDF"}, True),
        ({"link": "http://localhost:8000/uploads/1-paper.pdf?x=1"}, True),
        ({"link": "https://a.test/file", "mime": "application/pdf"}, True),
        ({"link": "https://a.test/notes.docx"}, False),
        ({"body": "no link"}, False),
    ],
)
def test_is_pdf(content, expected):
    assert is_pdf(content) == expected


def test_tweet_embed_rewrites_x_links():
    markup = tweet_embed_html("https://x.com/someone/status/123?s=20")

    assert 'href="https://twitter.com/someone/status/123"' in markup
    assert "platform.twitter.com/widgets.js" in markup


def test_tweet_embed_ignores_other_hosts():
    assert tweet_embed_html("https://example.com/status/1") is None
    assert tweet_embed_html(None) is None
