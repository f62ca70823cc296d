import os
import logging

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from google.auth.transport.requests import Request
from googleapiclient.discovery import build

from gdocs.config import get_env, get_optional_env, resolve_path

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/documents']


def get_credentials() -> Credentials:
    """Get Google Docs API credentials.

    A bearer token in GOOGLE_ACCESS_TOKEN is used as-is and never refreshed.
    Otherwise the authorized-user token file is loaded (refreshing it, or
    running the installed-app OAuth flow when it is missing or invalid).
    """
    access_token = get_optional_env("GOOGLE_ACCESS_TOKEN")
    if access_token:
        return Credentials(token=access_token)

    creds = None
    token_path = resolve_path(get_env("GOOGLE_TOKEN_PATH"))
    credentials_path = resolve_path(get_env("GOOGLE_CREDENTIALS_PATH"))

    if not os.path.exists(credentials_path):
        raise RuntimeError(f"Credentials file not found: {credentials_path}")
    if not os.path.exists(token_path):
        logger.info(f"Token file not found: {token_path} (will be created on first auth)")

    if os.path.exists(token_path) and os.path.getsize(token_path) > 0:
        try:
            creds = Credentials.from_authorized_user_file(token_path, SCOPES)
        except ValueError as e:
            logger.warning(f"Could not load token file {token_path}: {e}")
            creds = None

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            flow = InstalledAppFlow.from_client_secrets_file(credentials_path, SCOPES)
            creds = flow.run_local_server(port=0)

        with open(token_path, 'w') as token:
            token.write(creds.to_json())

    return creds


def get_docs_service():
    """Get Google Docs service object."""
    creds = get_credentials()
    return build('docs', 'v1', credentials=creds)
