from flask import Flask, request, jsonify
from flask_cors import CORS

# --- Services & Utils ---
from utils.config import Config
from utils.upload import UploadReceiver
from utils.utils import setup_logger
from services.analyzer import MedicineAnalyzer
from services.errors import MediSnapError
from services.inference import build_client
from services.normalizer import ResponseNormalizer

logger = setup_logger(__name__)


def build_analyzer(config):
    return MedicineAnalyzer(
        build_client(config),
        ResponseNormalizer(strict=config.STRICT_SCHEMA),
        max_output_tokens=config.MAX_OUTPUT_TOKENS,
    )


def server_error(e):
    code = e.code if isinstance(e, MediSnapError) else "internal_error"
    return jsonify({
        "success": False,
        "message": "Server Error",
        "error": {"code": code, "detail": str(e)}
    }), 500


def create_app(analyzer=None, config=None):
    # --- App Config ---
    config = config or Config()
    config.validate()

    app = Flask(__name__)
    CORS(app)

    # --- Initialize Core Services ---
    receiver = UploadReceiver(config.UPLOAD_DIR)
    analyzer = analyzer or build_analyzer(config)

    # --- Error Handling ---
    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({"success": False, "message": "Not Found"}), 404

    # --- Routes ---
    @app.route('/')
    def index():
        return jsonify({"msg": "WELCOME TO MEDI_SNAP"})

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"}), 200

    @app.route('/analyze', methods=['POST'])
    def analyze():
        file_path = None
        try:
            file_path = receiver.save(request.files.get('image'))
            data = analyzer.analyze(file_path)
            return jsonify({"success": True, "data": data})
        except Exception as e:
            logger.error(f"Analyze Error: {e}", exc_info=True)
            return server_error(e)
        finally:
            if file_path and config.DELETE_UPLOADS:
                receiver.discard(file_path)

    return app


if __name__ == '__main__':
    config = Config()
    app = create_app(config=config)
    logger.info(f"Server running at http://localhost:{config.PORT}")
    app.run(host="0.0.0.0", port=config.PORT, threaded=True)
