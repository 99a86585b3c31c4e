# app.py - Flask entrypoint
import logging

from flask import Flask, request, jsonify

from embed_search.config import LOG_LEVEL, PORT
from embed_search.errors import InvalidQueryError
from embed_search.orchestrator import search

logger = logging.getLogger(__name__)

app = Flask(__name__, static_folder="static")


@app.route('/api/search', methods=['GET'])
def api_search():
    q = request.args.get('q', '')
    if not q:
        return jsonify({'error': 'Missing q parameter'}), 400
    try:
        response = search(q)
    except InvalidQueryError:
        return jsonify({'error': 'Missing q parameter'}), 400
    except Exception:
        logger.exception("Search error")
        return jsonify({'error': 'Internal error'}), 500
    return jsonify(response.to_dict())


@app.route('/')
@app.route('/<path:path>')
def index(path=None):
    return app.send_static_file('index.html')


def configure_logging():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


if __name__ == '__main__':
    configure_logging()
    logger.info("tiktok-embed-search listening on port %d", PORT)
    app.run(host='127.0.0.1', port=PORT)
