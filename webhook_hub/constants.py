import os

# Configurações globais de ambiente
DISCORD_WEBHOOK_URL = os.getenv("DISCORD_WEBHOOK_URL")
APP_PORT = int(os.getenv("APP_PORT", "3000"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Segredos de assinatura por provedor (opcionais: sem segredo a verificação é pulada)
VERCEL_WEBHOOK_SECRET = os.getenv("VERCEL_WEBHOOK_SECRET")
HF_WEBHOOK_SECRET = os.getenv("HF_WEBHOOK_SECRET")

# Timeout do POST para o Discord; vazio = padrão do requests (sem timeout)
_discord_timeout_env = os.getenv("DISCORD_TIMEOUT_SECONDS", "").strip()
DISCORD_TIMEOUT_SECONDS = float(_discord_timeout_env) if _discord_timeout_env else None

SERVICE_NAME = "Webhook Hub"

# Cabeçalhos de assinatura (nomes em minúsculas; lookup é case-insensitive)
VERCEL_SIGNATURE_HEADER = "x-vercel-signature"
HF_SIGNATURE_HEADER = "x-hub-signature-256"
HF_SECRET_HEADER = "x-webhook-secret"

# Limite fixo para prévias de texto livre (comentários)
PREVIEW_MAX_CHARS = 100

VERCEL_ICON_URL = "https://assets.vercel.com/image/upload/v1588805858/repositories/vercel/logo.png"
HF_ICON_URL = "https://huggingface.co/front/assets/huggingface_logo-noborder.svg"

VERCEL_BLUE = 0x0070F3
DISCORD_BLURPLE = 0x5865F2

# Tipos de deploy da Vercel com título/cor/emoji fixos
VERCEL_DEPLOYMENT_CONFIGS = {
    "created": {"emoji": "🚀", "status": "Deployment Started", "color": VERCEL_BLUE},
    "succeeded": {"emoji": "✅", "status": "Deployment Succeeded", "color": 0x00D924},
    "failed": {"emoji": "❌", "status": "Deployment Failed", "color": 0xFF0000},
    "ready": {"emoji": "🎉", "status": "Deployment Ready", "color": 0x00D924},
    "canceled": {"emoji": "🚫", "status": "Deployment Canceled", "color": 0x6B7280},
    "unknown": {"emoji": "📦", "status": "Deployment Update", "color": VERCEL_BLUE},
}

# Estados em que o deploy já tem URL navegável
VERCEL_LIVE_STATES = {"ready", "succeeded"}

VERCEL_COMMIT_META_KEYS = ("githubCommitSha", "gitlabCommitSha", "bitbucketCommitSha")

HF_COLORS = {
    "push": 0xFFD21E,
    "repo": 0xFF6B35,
    "config": 0x6366F1,
    "pull_request": 0x22C55E,
    "discussion": 0x3B82F6,
    "comment": 0x8B5CF6,
    "default": 0xFF6B35,
}
