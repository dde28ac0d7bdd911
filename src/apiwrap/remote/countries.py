from __future__ import annotations

from apiwrap.client.vendor import Resource
from apiwrap.remote.models import CountriesResponse


class Countries(Resource):
    async def get_supported_country(self) -> CountriesResponse:
        """List the countries Remote supports."""
        return await self.http.get_model(
            "/v1/countries", CountriesResponse, documented_errors=False
        )
