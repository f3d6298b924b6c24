"""
Asset Controller

Serves the browser shell through the offline asset cache and renders the
service worker that mirrors it on the client.
"""

from flask import Blueprint, Response, abort, current_app, render_template

from ..services.asset_cache import get_asset_cache

asset_bp = Blueprint('assets', __name__)


def _serve(url):
    asset_cache = get_asset_cache()
    if not asset_cache:
        abort(503)

    asset = asset_cache.fetch(url)
    if asset is None:
        abort(404)
    return Response(asset.body, mimetype=asset.mimetype)


@asset_bp.route('/', methods=['GET'])
def index():
    return _serve('/')


@asset_bp.route('/service-worker.js', methods=['GET'])
def service_worker():
    """Service worker precaching the same assets as the server-side cache."""
    asset_cache = get_asset_cache()
    urls = asset_cache.urls if asset_cache else []
    cache_name = asset_cache.cache_name if asset_cache else current_app.config['ASSET_CACHE_NAME']

    body = render_template('service-worker.js', cache_name=cache_name, urls=urls)
    response = Response(body, mimetype='application/javascript')
    response.headers['Cache-Control'] = 'no-cache'
    return response


@asset_bp.route('/<path:asset_path>', methods=['GET'])
def asset(asset_path):
    return _serve(f'/{asset_path}')
