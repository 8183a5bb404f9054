"""
Flask app serving user records from a JSON file.

Stands in for the remote users endpoint during local development, so the
accessor and CLI can run against http://localhost:3000/users.
"""

import json
import os

from flask import Flask, jsonify

from config import PORT, USERS_DATA_FILE, USERS_PATH, logger


def create_app(data_file: str = USERS_DATA_FILE) -> Flask:
    app = Flask(__name__)

    @app.route(USERS_PATH)
    def users():
        """Return the users file as a JSON array."""
        try:
            with open(data_file, encoding="utf-8") as f:
                records = json.load(f)
        except FileNotFoundError:
            logger.error("Users file '%s' not found", data_file)
            return jsonify({"error": f"Users file '{data_file}' not found"}), 500
        except ValueError as e:
            logger.error("Users file '%s' is not valid JSON: %s", data_file, e)
            return jsonify({"error": "Users file is not valid JSON"}), 500

        if not isinstance(records, list):
            logger.error("Users file '%s' does not hold a JSON array", data_file)
            return jsonify({"error": "Users file does not hold a JSON array"}), 500

        logger.info("Serving %d user(s)", len(records))
        return jsonify(records)

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy", "users_file": data_file, "exists": os.path.exists(data_file)})

    return app


if __name__ == "__main__":
    logger.info("=== Running users server in development mode ===")
    logger.info("Serving %s at http://localhost:%d%s", USERS_DATA_FILE, PORT, USERS_PATH)
    create_app().run(host="0.0.0.0", port=PORT, debug=False)
