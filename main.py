import logging

from webhook_hub.controller import create_app
from webhook_hub.constants import APP_PORT, DEBUG_MODE, DISCORD_WEBHOOK_URL, LOG_LEVEL, VERCEL_WEBHOOK_SECRET, HF_WEBHOOK_SECRET

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("webhook_hub")

app = create_app()

if __name__ == '__main__':
    logger.info(f"Discord webhook: {'configurado' if DISCORD_WEBHOOK_URL else 'NÃO configurado'}")
    logger.info(f"Segredo Vercel: {'configurado' if VERCEL_WEBHOOK_SECRET else 'não configurado (verificação desativada)'}")
    logger.info(f"Segredo Hugging Face: {'configurado' if HF_WEBHOOK_SECRET else 'não configurado (verificação desativada)'}")
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE)
