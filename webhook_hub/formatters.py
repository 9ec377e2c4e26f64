"""Montagem das mensagens de notificação por provedor.

Cada formatador recebe ``(payload, event_key)`` e devolve uma
``NotificationMessage`` nova. A escolha do formatador é feita por tabelas
de lookup (chave do evento -> função) com um fallback por provedor, de modo
que eventos desconhecidos sempre geram uma notificação genérica.
"""
from typing import Callable, Dict, Optional

from .constants import (
    DISCORD_BLURPLE,
    HF_COLORS,
    HF_ICON_URL,
    VERCEL_BLUE,
    VERCEL_COMMIT_META_KEYS,
    VERCEL_DEPLOYMENT_CONFIGS,
    VERCEL_ICON_URL,
    VERCEL_LIVE_STATES,
)
from .detection import classify_event, split_hf_event
from .models import EmbedField, NotificationMessage, Provider
from .utils import capitalize_first, code, dig, pick_first_nonempty, short_sha, truncate_preview, utc_now_iso

Formatter = Callable[[dict, str], NotificationMessage]

HF_MAX_REFS_LISTED = 10


# ---------- Vercel ----------

def _vercel_section(payload, key):
    # Payload atual da Vercel aninha deployment/project em "payload"
    value = dig(payload, key)
    if isinstance(value, dict):
        return value
    nested = dig(payload, "payload", key)
    return nested if isinstance(nested, dict) else {}


def _vercel_project_name(payload):
    return pick_first_nonempty(
        dig(_vercel_section(payload, "project"), "name"),
        dig(payload, "payload", "name"),
    )


def _deployment_link(url):
    url = str(url).strip()
    if url.startswith(("http://", "https://")):
        return url
    return f"https://{url}"


def deployment_kind(event_key):
    prefix, _, kind = (event_key or "").partition(".")
    if prefix == "deployment" and kind in VERCEL_DEPLOYMENT_CONFIGS:
        return kind
    return "unknown"


def format_vercel_deployment(payload, event_key):
    deployment = _vercel_section(payload, "deployment")
    project_name = _vercel_project_name(payload)
    kind = deployment_kind(event_key)
    config = VERCEL_DEPLOYMENT_CONFIGS[kind]

    state = pick_first_nonempty(deployment.get("state"))
    type_suffix = pick_first_nonempty((event_key or "").partition(".")[2])

    fields = [
        EmbedField("🏗️ Project", project_name or "Unknown", True),
        EmbedField("🌍 Environment", pick_first_nonempty(deployment.get("target")) or "production", True),
        EmbedField("📅 Status", state or type_suffix or "unknown", True),
    ]

    link = None
    url = pick_first_nonempty(deployment.get("url"))
    is_live = kind in VERCEL_LIVE_STATES or (state or "").lower() in VERCEL_LIVE_STATES
    if url and is_live:
        link = _deployment_link(url)
        fields.append(EmbedField("🔗 Deployment URL", f"[{url}]({link})", False))

    meta = deployment.get("meta") if isinstance(deployment.get("meta"), dict) else {}
    commit = short_sha(pick_first_nonempty(*(meta.get(k) for k in VERCEL_COMMIT_META_KEYS)), 8)
    if commit:
        fields.append(EmbedField("🔗 Commit", code(commit), True))

    return NotificationMessage(
        title=f"{config['emoji']} {project_name or 'Project'} - {config['status']}",
        color=config["color"],
        timestamp=utc_now_iso(),
        fields=tuple(fields),
        url=link,
        footer_text="Vercel",
        footer_icon_url=VERCEL_ICON_URL,
    )


def format_vercel_generic(payload, event_key):
    deployment = _vercel_section(payload, "deployment")
    url = pick_first_nonempty(deployment.get("url"))
    return NotificationMessage(
        title=f"⚡ Vercel Event: {event_key}",
        description=f"Received {event_key} event from Vercel",
        color=VERCEL_BLUE,
        timestamp=utc_now_iso(),
        fields=(
            EmbedField("🏗️ Project", _vercel_project_name(payload) or "Unknown", True),
            EmbedField("🔔 Event Type", event_key, True),
        ),
        url=_deployment_link(url) if url else None,
        footer_text="Vercel",
        footer_icon_url=VERCEL_ICON_URL,
    )


VERCEL_FORMATTERS: Dict[str, Formatter] = {
    f"deployment.{kind}": format_vercel_deployment
    for kind in ("created", "succeeded", "failed", "ready", "canceled")
}


# ---------- Hugging Face ----------

def _hf_repo_name(payload):
    return pick_first_nonempty(dig(payload, "repo", "name"), dig(payload, "repository", "name")) or "Unknown"


def _hf_web_url(payload, *path):
    url = dig(payload, *path, "url")
    if isinstance(url, dict):
        return pick_first_nonempty(url.get("web"))
    return pick_first_nonempty(url)


def _hf_message(title, description, color, fields, url):
    return NotificationMessage(
        title=title,
        description=description,
        color=color,
        timestamp=utc_now_iso(),
        fields=tuple(fields),
        url=url,
        footer_text="Hugging Face",
        footer_icon_url=HF_ICON_URL,
    )


def _ref_change(ref):
    if not pick_first_nonempty(ref.get("oldSha")):
        return "created"
    if not pick_first_nonempty(ref.get("newSha")):
        return "deleted"
    return "updated"


def describe_updated_refs(updated_refs):
    refs = [r for r in (updated_refs or []) if isinstance(r, dict) and r.get("ref")]
    if not refs:
        return "No refs reported"
    lines = [f"{code(r['ref'])} ({_ref_change(r)})" for r in refs[:HF_MAX_REFS_LISTED]]
    if len(refs) > HF_MAX_REFS_LISTED:
        lines.append(f"... and {len(refs) - HF_MAX_REFS_LISTED} more")
    return "\n".join(lines)


def format_hf_push(payload, event_key):
    repo_name = _hf_repo_name(payload)
    fields = [EmbedField("📦 Repository", code(repo_name), True)]
    commit = short_sha(dig(payload, "repo", "headSha"), 7)
    if commit:
        fields.append(EmbedField("🔗 Commit", code(commit), True))
    fields.append(EmbedField("🌿 Updated Refs", describe_updated_refs(dig(payload, "updatedRefs")), False))
    return _hf_message(
        "🔥 New push to repository",
        f"New changes were pushed to **{code(repo_name)}**.",
        HF_COLORS["push"],
        fields,
        _hf_web_url(payload, "repo"),
    )


def format_hf_repo(payload, event_key):
    _, action = split_hf_event(payload)
    repo_name = _hf_repo_name(payload)
    repo_type = pick_first_nonempty(dig(payload, "repo", "type")) or "repository"
    return _hf_message(
        f"🏗️ Repository {capitalize_first(action)}",
        f"The {repo_type} **{code(repo_name)}** was {action}.",
        HF_COLORS["repo"],
        [
            EmbedField("📦 Repository", code(repo_name), True),
            EmbedField("🏷️ Type", code(repo_type), True),
            EmbedField("🔔 Action", code(action), True),
        ],
        _hf_web_url(payload, "repo"),
    )


def format_hf_config(payload, event_key):
    repo_name = _hf_repo_name(payload)
    updated = dig(payload, "updatedConfig")
    keys = list(updated.keys()) if isinstance(updated, dict) else []
    return _hf_message(
        "⚙️ Configuration updated",
        f"Configuration changes were made to **{code(repo_name)}**.",
        HF_COLORS["config"],
        [
            EmbedField("📦 Repository", code(repo_name), True),
            EmbedField("🔧 Updated Settings", ", ".join(code(k) for k in keys) if keys else "Configuration updated", False),
        ],
        _hf_web_url(payload, "repo"),
    )


def _discussion_kind(payload):
    is_pr = bool(dig(payload, "discussion", "isPullRequest", default=False))
    return is_pr, "Pull Request" if is_pr else "Discussion"


def format_hf_discussion(payload, event_key):
    _, action = split_hf_event(payload)
    repo_name = _hf_repo_name(payload)
    is_pr, kind = _discussion_kind(payload)
    return _hf_message(
        f"💬 {kind} {capitalize_first(action)}",
        f"A {kind.lower()} was {action} in **{code(repo_name)}**.",
        HF_COLORS["pull_request" if is_pr else "discussion"],
        [
            EmbedField("📦 Repository", code(repo_name), True),
            EmbedField("📝 Title", pick_first_nonempty(dig(payload, "discussion", "title")) or "No title", False),
            EmbedField("🔔 Action", code(action), True),
        ],
        _hf_web_url(payload, "discussion"),
    )


def format_hf_comment(payload, event_key):
    _, action = split_hf_event(payload)
    repo_name = _hf_repo_name(payload)
    _, kind = _discussion_kind(payload)
    content = dig(payload, "comment", "content")
    return _hf_message(
        f"💭 Comment {capitalize_first(action)}",
        f"A comment was {action} on a {kind.lower()} in **{code(repo_name)}**.",
        HF_COLORS["comment"],
        [
            EmbedField("📦 Repository", code(repo_name), True),
            EmbedField("📝 Discussion", pick_first_nonempty(dig(payload, "discussion", "title")) or "No title", False),
            EmbedField("💬 Comment Preview", truncate_preview(content) if content else "No content", False),
        ],
        _hf_web_url(payload, "comment"),
    )


def format_hf_generic(payload, event_key):
    url = _hf_web_url(payload, "repo") or pick_first_nonempty(dig(payload, "repository", "html_url"))
    return _hf_message(
        f"🤗 Hugging Face Event: {event_key}",
        f"Received {event_key} event from Hugging Face",
        HF_COLORS["default"],
        [
            EmbedField("📦 Repository", _hf_repo_name(payload), True),
            EmbedField("🔔 Event Type", event_key, True),
        ],
        url,
    )


# chave = scope do evento; a action é tratada dentro de cada formatador
HF_FORMATTERS: Dict[str, Formatter] = {
    "repo.content": format_hf_push,
    "repo": format_hf_repo,
    "repo.config": format_hf_config,
    "discussion": format_hf_discussion,
    "discussion.comment": format_hf_comment,
}


# ---------- Genérico ----------

def format_generic(payload, event_key):
    provider_name = pick_first_nonempty(dig(payload, "provider")) or Provider.GENERIC.display_name
    name = pick_first_nonempty(
        dig(payload, "repo", "name"),
        dig(payload, "repository", "name"),
        dig(payload, "project", "name"),
        dig(payload, "repository"),
        dig(payload, "project"),
    )
    fields = []
    if name:
        fields.append(EmbedField("📦 Repository", name, True))
    fields.append(EmbedField("🔔 Event Type", event_key, True))
    return NotificationMessage(
        title=f"{provider_name} Event: {event_key}",
        color=DISCORD_BLURPLE,
        timestamp=utc_now_iso(),
        fields=tuple(fields),
        url=pick_first_nonempty(dig(payload, "url")),
    )


# ---------- Dispatch ----------

def resolve_formatter(provider: Provider, payload, event_key: str) -> Formatter:
    if provider is Provider.VERCEL:
        return VERCEL_FORMATTERS.get(event_key, format_vercel_generic)
    if provider is Provider.HUGGING_FACE:
        scope, _ = split_hf_event(payload)
        return HF_FORMATTERS.get(scope, format_hf_generic)
    return format_generic


def format_notification(provider: Provider, payload, event_key: Optional[str] = None) -> NotificationMessage:
    if event_key is None:
        event_key = classify_event(provider, payload)
    formatter = resolve_formatter(provider, payload, event_key)
    return formatter(payload, event_key)
