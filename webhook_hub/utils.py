from datetime import datetime, timezone

from .constants import PREVIEW_MAX_CHARS


def _is_meaningful(value):
    if value is None:
        return False
    if isinstance(value, (dict, list)):
        return False
    return str(value).strip() != ""


def pick_first_nonempty(*candidates):
    for c in candidates:
        if _is_meaningful(c):
            return str(c).strip()
    return None


def dig(data, *path, default=None):
    """Acessa chaves aninhadas sem quebrar quando um nível não é dict."""
    current = data
    for key in path:
        if not isinstance(current, dict):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def utc_now_iso():
    return datetime.now(timezone.utc).isoformat()


def truncate_preview(text, limit=PREVIEW_MAX_CHARS):
    if text is None:
        return None
    text = str(text)
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def short_sha(sha, length):
    if not _is_meaningful(sha):
        return None
    return str(sha).strip()[:length]


def capitalize_first(text):
    text = str(text or "")
    return text[:1].upper() + text[1:]


def code(value):
    return f"`{value}`"
