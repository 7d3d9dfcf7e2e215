"""Firestore client construction (REST-based, no firebase-admin).

Credentials, in order of precedence:
- FIREBASE_SERVICE_ACCOUNT_KEY (JSON string) or FIREBASE_SERVICE_ACCOUNT_PATH
  (file path): requests carry a google-auth access token.
- APIKEY (Firebase web API key): requests carry ``?key=`` and are subject to the
  project's Firestore security rules, like the web SDK.
"""

import json
import logging
from pathlib import Path

from schoolpay.core.config import Settings
from schoolpay.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    _get_credentials,
)
from schoolpay.infrastructure.firebase.record_store import FirestoreRecordStore

logger = logging.getLogger(__name__)


def _load_key_dict(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path."""
    key = settings.firebase_service_account_key
    key_json = key.get_secret_value() if key else None
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            raise ValueError(
                f"FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: {path} (resolved: {resolved})"
            )
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def create_firestore_client(settings: Settings) -> FirestoreRESTClient:
    """Build the Firestore REST client from settings.

    Raises:
        ValueError: If the service account is malformed or no project id is known.
    """
    key_dict = _load_key_dict(settings)
    if key_dict:
        project_id = settings.firebase_project_id or key_dict.get("project_id")
        if not project_id:
            raise ValueError("Firebase service account JSON missing 'project_id'")
        logger.info("Firestore client using service account for project %s", project_id)
        return FirestoreRESTClient(project_id, _get_credentials(key_dict))

    if not settings.firebase_project_id:
        raise ValueError("PROJECTID is required for the Firestore backend")
    api_key = (
        settings.firebase_api_key.get_secret_value() if settings.firebase_api_key else None
    )
    if not api_key:
        logger.warning(
            "No APIKEY or service account configured; Firestore requests are unauthenticated"
        )
    logger.info("Firestore client using web API key for project %s", settings.firebase_project_id)
    return FirestoreRESTClient(settings.firebase_project_id, api_key=api_key)


def create_firestore_store(settings: Settings) -> FirestoreRecordStore:
    """Return a FirestoreRecordStore owning a new REST client."""
    return FirestoreRecordStore(create_firestore_client(settings))
