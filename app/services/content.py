# app/services/content.py

import re
import html
from urllib.parse import urlparse, parse_qs

CONTENT_TYPES = ["youtube", "twitter", "image", "document", "text"]

TYPE_LABELS = {
    "youtube": "▶️ YouTube",
    "twitter": "🐦 Twitter",
    "image": "🖼️ Image",
    "document": "📄 Document",
    "text": "📝 Text",
}

_YOUTUBE_RE = re.compile(r"youtu(?:\.be|be\.com)/.+|v=")
_TWITTER_RE = re.compile(r"twitter|x\.com")
_IMAGE_RE = re.compile(r"\.(png|jpe?g|gif|webp|svg)(?:\?|$)", re.IGNORECASE)
_DOCUMENT_RE = re.compile(r"\.(pdf|docx?|txt)(?:\?|$)", re.IGNORECASE)


def infer_type(content):
    """
    Returns the item's type, guessing from the link when the row has none.
    """
    if content.get("type"):
        return content["type"]

    link = content.get("link") or ""
    if _YOUTUBE_RE.search(link):
        return "youtube"
    if _TWITTER_RE.search(link):
        return "twitter"
    if _IMAGE_RE.search(link):
        return "image"
    if _DOCUMENT_RE.search(link):
        return "document"
    if content.get("body"):
        return "text"
    return "youtube"


def youtube_video_id(link):
    if not link:
        return None
    parsed = urlparse(link)
    host = parsed.netloc.lower()

    if host.endswith("youtu.be"):
        video_id = parsed.path.lstrip("/").split("/")[0]
        return video_id or None
    if "youtube" in host:
        if parsed.path == "/watch":
            return parse_qs(parsed.query).get("v", [None])[0]
        for prefix in ("/embed/", "/shorts/", "/live/"):
            if parsed.path.startswith(prefix):
                return parsed.path[len(prefix):].split("/")[0] or None
    return None


def filter_contents(contents, content_type=None):
    if not content_type:
        return list(contents)
    return [c for c in contents if infer_type(c) == content_type]


def parse_tags(raw):
    """'a, b,,c ' -> ['a', 'b', 'c'] with duplicates dropped."""
    tags = [t.strip() for t in (raw or "").split(",")]
    return list(dict.fromkeys(t for t in tags if t))


def is_pdf(content):
    link = content.get("link") or ""
    return content.get("mime") == "application/pdf" or bool(re.search(r"\.pdf(?:\?|$)", link, re.IGNORECASE))


def tweet_embed_html(link):
    """
    Blockquote markup that Twitter's widgets.js turns into an embedded tweet.
    x.com links are rewritten to twitter.com, which the widget expects.
    """
    if not link:
        return None
    parsed = urlparse(link)
    host = parsed.netloc.lower().removeprefix("www.")
    if host not in ("twitter.com", "x.com", "mobile.twitter.com"):
        return None

    tweet_url = html.escape(f"https://twitter.com{parsed.path}", quote=True)
    return (
        f'<blockquote class="twitter-tweet" data-theme="dark"><a href="{tweet_url}"></a></blockquote>'
        '<script async src="https://platform.twitter.com/widgets.js" charset="utf-8"></script>'
    )
