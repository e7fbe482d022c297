import logging
import os
import random
import uuid

import requests
from flask import Blueprint, Flask, current_app, jsonify, request, send_from_directory, url_for
from werkzeug.utils import secure_filename

import settings
from article_data import article_records, search_articles
from breed_data import build_custom_breed, builtin_breeds, find_breed, search_breeds
from breed_store import CUSTOM, IDENTIFIED, SAVED, BreedStore, StoreError
from credentials import CredentialProvider
from identification import IdentificationWorkflow
from matcher import CatalogMatcher
from openai_api import BreedIdentificationClient

logger = logging.getLogger(__name__)

bp = Blueprint("breeds", __name__)


def create_app(client=None, matcher=None, store=None, is_entitled=None, config=None):
    """Composition root: every collaborator can be swapped out by argument."""
    app = Flask(__name__)
    app.config['UPLOAD_FOLDER'] = settings.UPLOAD_FOLDER
    app.config['DATA_DIR'] = settings.DATA_DIR
    app.config['FREE_BREED_LIMIT'] = settings.FREE_BREED_LIMIT
    app.config['FREE_ARTICLE_LIMIT'] = settings.FREE_ARTICLE_LIMIT
    app.config['MAX_CONTENT_LENGTH'] = settings.MAX_UPLOAD_BYTES
    if config:
        app.config.update(config)
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    if client is None:
        session = requests.Session()
        client = BreedIdentificationClient(CredentialProvider(session=session), session=session)
    matcher = matcher or CatalogMatcher(random.Random())
    catalog = builtin_breeds()

    app.extensions["chicken_ai"] = {
        "workflow": IdentificationWorkflow(client, matcher, catalog),
        "catalog": catalog,
        "articles": article_records(),
        "store": store or BreedStore(app.config['DATA_DIR']),
        "is_entitled": is_entitled or (lambda: settings.PREMIUM_UNLOCKED),
    }
    app.register_blueprint(bp)
    return app


def _services():
    return current_app.extensions["chicken_ai"]


def _all_breeds():
    # custom breeds are browsable but never part of the identification vocabulary
    services = _services()
    return services["catalog"] + services["store"].breeds(CUSTOM)


def _entitled():
    return bool(_services()["is_entitled"]())


def _locked(listing, limit_key):
    """Ids past the free limit, counted by position in the listing as shown."""
    if _entitled():
        return set()
    return {item["id"] for item in listing[current_app.config[limit_key]:]}


def _premium_required():
    return jsonify({"error": "premium subscription required"}), 402


def _lookup(breed_id):
    return find_breed(breed_id, _all_breeds())


@bp.errorhandler(StoreError)
def store_unavailable(e):
    logger.error("breed store write failed: %s", e)
    return jsonify({"error": "storage unavailable"}), 503


@bp.errorhandler(413)
def upload_too_large(e):
    return jsonify({"error": "upload too large"}), 413


# ----------------- Identification -----------------
@bp.route("/identify", methods=["POST"])
def identify():
    if not _entitled():
        return _premium_required()

    image_file = request.files.get("image")
    if image_file is None or image_file.filename == "":
        return jsonify({"error": "no image uploaded"}), 400

    services = _services()
    outcome = services["workflow"].run(image_file.read())
    if outcome.matched:
        try:
            services["store"].add_identified(outcome.top)
        except StoreError as e:
            # history is best effort; the user still gets their candidates
            logger.warning("could not record identified breed %s: %s", outcome.top["name"], e)
    return jsonify(outcome.to_dict())


# ----------------- Catalog -----------------
@bp.route("/breeds")
def list_breeds():
    results = search_breeds(request.args.get("q", ""), _all_breeds())
    locked = _locked(results, 'FREE_BREED_LIMIT')
    return jsonify({
        "breeds": [dict(b, locked=b["id"] in locked) for b in results],
        "premium": _entitled(),
    })


@bp.route("/breeds/<breed_id>")
def breed_detail(breed_id):
    """Detail for a breed; `q` names the listing it was opened from."""
    results = search_breeds(request.args.get("q", ""), _all_breeds())
    breed = find_breed(breed_id, results) or _lookup(breed_id)
    if breed is None:
        return jsonify({"error": "breed not found"}), 404
    if breed not in results or breed_id in _locked(results, 'FREE_BREED_LIMIT'):
        if not _entitled():
            return _premium_required()
    return jsonify(dict(breed, saved=_services()["store"].is_saved(breed_id)))


# ----------------- Articles -----------------
@bp.route("/articles")
def list_articles():
    results = search_articles(request.args.get("q", ""), _services()["articles"])
    locked = _locked(results, 'FREE_ARTICLE_LIMIT')
    return jsonify({
        "articles": [dict(a, locked=a["id"] in locked) for a in results],
        "premium": _entitled(),
    })


@bp.route("/articles/<article_id>")
def article_detail(article_id):
    """Detail for an article; `q` names the listing it was opened from."""
    articles = _services()["articles"]
    results = search_articles(request.args.get("q", ""), articles)
    article = next((a for a in articles if a["id"] == article_id), None)
    if article is None:
        return jsonify({"error": "article not found"}), 404
    if article not in results or article_id in _locked(results, 'FREE_ARTICLE_LIMIT'):
        if not _entitled():
            return _premium_required()
    return jsonify(article)


# ----------------- Saved / history -----------------
@bp.route("/saved")
def saved_breeds():
    return jsonify({"breeds": _services()["store"].breeds(SAVED)})


@bp.route("/saved/<breed_id>", methods=["POST"])
def save_breed(breed_id):
    breed = _lookup(breed_id)
    if breed is None:
        return jsonify({"error": "breed not found"}), 404
    created = _services()["store"].save_breed(breed)
    return jsonify({"saved": True}), 201 if created else 200


@bp.route("/saved/<breed_id>/toggle", methods=["POST"])
def toggle_saved_breed(breed_id):
    breed = _lookup(breed_id)
    if breed is None:
        return jsonify({"error": "breed not found"}), 404
    return jsonify({"saved": _services()["store"].toggle_saved(breed)})


@bp.route("/saved/<breed_id>", methods=["DELETE"])
def unsave_breed(breed_id):
    if not _services()["store"].remove_breed(breed_id):
        return jsonify({"error": "breed not saved"}), 404
    return jsonify({"saved": False})


@bp.route("/history")
def identified_breeds():
    return jsonify({"breeds": _services()["store"].breeds(IDENTIFIED)})


@bp.route("/history/<breed_id>", methods=["DELETE"])
def remove_identified(breed_id):
    if not _services()["store"].remove_identified(breed_id):
        return jsonify({"error": "breed not in history"}), 404
    return jsonify({"removed": True})


# ----------------- Custom breeds -----------------
@bp.route("/custom")
def custom_breeds():
    return jsonify({"breeds": _services()["store"].breeds(CUSTOM)})


@bp.route("/custom", methods=["POST"])
def add_custom_breed():
    data = request.form.to_dict()
    data["colors"] = request.form.getlist("colors")
    if len(data["colors"]) == 1:
        data["colors"] = data["colors"][0]

    breed, missing = build_custom_breed(data)
    if breed is None:
        return jsonify({"error": "missing required fields", "missing": missing}), 400

    image_path = None
    image_file = request.files.get("image")
    if image_file is not None and image_file.filename != "":
        filename = f"{uuid.uuid4().hex}_{secure_filename(image_file.filename.lower())}"
        image_path = os.path.join(current_app.config['UPLOAD_FOLDER'], filename)
        image_file.save(image_path)
        breed["image_url"] = url_for("breeds.uploaded_file", filename=filename)

    try:
        _services()["store"].add_custom(breed)
    except StoreError:
        if image_path is not None:
            os.remove(image_path)
        raise
    logger.info("added custom breed %s (%s)", breed["name"], breed["id"])
    return jsonify(breed), 201


@bp.route("/custom/<breed_id>", methods=["DELETE"])
def remove_custom_breed(breed_id):
    if not _services()["store"].remove_custom(breed_id):
        return jsonify({"error": "custom breed not found"}), 404
    return jsonify({"removed": True})


@bp.route('/uploads/<filename>')
def uploaded_file(filename):
    return send_from_directory(os.path.abspath(current_app.config['UPLOAD_FOLDER']), filename)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app().run(debug=True)
