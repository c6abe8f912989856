# college_client.py (REST client for the remote college service)
import logging

import requests

from .mapping import college_from_json

logger = logging.getLogger(__name__)


class CollegeServiceError(Exception):
    """The college service answered, but not with a usable college."""


class CollegeClient:
    """GET-by-id against ``{base_url}/college/{id}``.

    The ``requests.Session`` is owned by whoever builds the client; the
    student service creates one per application and closes it on exit.
    """

    def __init__(self, base_url, session=None, timeout=5.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_college(self, college_id):
        url = f"{self.base_url}/college/{college_id}"
        logger.debug("GET %s", url)
        resp = self.session.get(url, timeout=self.timeout)
        if not resp.ok:
            raise CollegeServiceError(f"GET {url} returned {resp.status_code}")
        if not resp.content:
            raise CollegeServiceError(f"GET {url} returned an empty body")
        try:
            data = resp.json()
        except ValueError as e:
            raise CollegeServiceError(f"GET {url} returned invalid JSON: {e}") from e
        if data is None:
            raise CollegeServiceError(f"GET {url} returned null")
        try:
            return college_from_json(data)
        except ValueError as e:
            raise CollegeServiceError(str(e)) from e

    def close(self):
        self.session.close()
