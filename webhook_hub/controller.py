import logging
import time

from flask import Flask, jsonify, request

from . import __version__
from .constants import (
    APP_PORT,
    DEBUG_MODE,
    DISCORD_WEBHOOK_URL,
    HF_WEBHOOK_SECRET,
    SERVICE_NAME,
    VERCEL_WEBHOOK_SECRET,
)
from .models import Provider
from .router import build_event, route_event
from .services import send_discord_embed
from .utils import utc_now_iso

logger = logging.getLogger(__name__)

ENDPOINTS = {
    "health": "GET /",
    "healthCheck": "GET /health",
    "huggingface": "POST /webhook/huggingface",
    "vercel": "POST /webhook/vercel",
    "generic": "POST /webhook/generic",
    "test": "POST /webhook/test",
}


def create_app(discord_webhook_url=DISCORD_WEBHOOK_URL, vercel_secret=VERCEL_WEBHOOK_SECRET,
               hf_secret=HF_WEBHOOK_SECRET, sender=send_discord_embed):
    app = Flask(__name__)
    started_at = time.monotonic()

    secrets = {
        Provider.VERCEL: vercel_secret,
        Provider.HUGGING_FACE: hf_secret,
        Provider.GENERIC: None,
    }

    def handle_webhook(provider):
        raw_body = request.get_data(cache=True)
        payload = request.get_json(force=True, silent=True)
        if DEBUG_MODE:
            print(f"[DEBUG] Received {provider.display_name} webhook: {payload}")

        event = build_event(provider, raw_body, request.headers, payload)
        outcome = route_event(event, discord_webhook_url, secrets[provider], sender=sender)
        return jsonify(outcome.body), outcome.status_code

    def handler_status(service, path, provider):
        body = {
            "service": service,
            "status": "active",
            "timestamp": utc_now_iso(),
            "endpoints": {"webhook": f"POST {path}"},
        }
        if provider in (Provider.VERCEL, Provider.HUGGING_FACE):
            body["security"] = {
                "signatureVerification": "enabled" if secrets[provider] else "disabled",
            }
        return jsonify(body)

    @app.route('/', methods=['GET'])
    def index():
        return jsonify({
            "name": SERVICE_NAME,
            "version": __version__,
            "status": "active",
            "timestamp": utc_now_iso(),
            "endpoints": ENDPOINTS,
            "environment": {
                "port": APP_PORT,
                "discordConfigured": bool(discord_webhook_url),
                "vercelSecretConfigured": bool(vercel_secret),
                "huggingFaceSecretConfigured": bool(hf_secret),
            },
        })

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            "status": "healthy",
            "timestamp": utc_now_iso(),
            "uptime": round(time.monotonic() - started_at, 3),
        })

    @app.route('/webhook/vercel', methods=['POST'])
    def vercel_webhook():
        return handle_webhook(Provider.VERCEL)

    @app.route('/webhook/vercel', methods=['GET'])
    def vercel_status():
        return handler_status("Vercel Webhook Handler", "/webhook/vercel", Provider.VERCEL)

    @app.route('/webhook/huggingface', methods=['POST'])
    def huggingface_webhook():
        return handle_webhook(Provider.HUGGING_FACE)

    @app.route('/webhook/huggingface', methods=['GET'])
    def huggingface_status():
        return handler_status("Hugging Face Webhook Handler", "/webhook/huggingface", Provider.HUGGING_FACE)

    @app.route('/webhook/generic', methods=['POST'])
    def generic_webhook():
        return handle_webhook(Provider.GENERIC)

    @app.route('/webhook/test', methods=['POST'])
    def test_webhook():
        payload = request.get_json(force=True, silent=True)
        logger.info(f"Webhook de teste recebido: {payload}")
        return jsonify({
            "success": True,
            "message": "Test webhook received successfully",
            "timestamp": utc_now_iso(),
            "receivedData": {
                "headers": dict(request.headers),
                "body": payload,
                "query": request.args.to_dict(),
            },
        })

    @app.errorhandler(404)
    def not_found(_error):
        return jsonify({
            "error": "Not Found",
            "message": f"Route {request.method} {request.path} not found",
            "availableEndpoints": ENDPOINTS,
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return jsonify({
            "error": "Method Not Allowed",
            "message": f"Method {request.method} not allowed on {request.path}",
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Erro não tratado: {error}")
        return jsonify({
            "error": "Internal Server Error",
            "message": str(error) if DEBUG_MODE else "Something went wrong",
            "timestamp": utc_now_iso(),
        }), 500

    return app
