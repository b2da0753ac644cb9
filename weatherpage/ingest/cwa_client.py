"""Central Weather Administration open-data API client."""

import logging
import os

import httpx

logger = logging.getLogger(__name__)

CWA_BASE_URL = "https://opendata.cwa.gov.tw"
FORECAST_DATASET = "F-C0032-001"
DEFAULT_USER_AGENT = "weatherpage/0.1.0"


class CwaClient:
    def __init__(
        self,
        base_url: str = CWA_BASE_URL,
        dataset_id: str = FORECAST_DATASET,
        api_key_env: str = "CWA_API_KEY",
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.dataset_id = dataset_id
        self.api_key_env = api_key_env
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, location_name: str) -> dict:
        """Fetch the 36-hour forecast for one county or city.

        The API key is read from the environment on every call. An unset key
        is sent as an empty string and left for the API to reject. Raises
        httpx errors on transport failure or non-2xx status, and ValueError
        on a non-JSON body. No retries.
        """
        url = f"{self.base_url}/api/v1/rest/datastore/{self.dataset_id}"
        params = {
            "Authorization": os.environ.get(self.api_key_env, ""),
            "locationName": location_name,
        }
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()
