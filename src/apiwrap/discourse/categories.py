from __future__ import annotations

from typing import Optional

from apiwrap.client.vendor import Resource
from apiwrap.discourse.models import ListCategoriesResponse


class Categories(Resource):
    async def list(self, include_subcategories: Optional[bool] = None) -> ListCategoriesResponse:
        """Retrieve the site's categories.

        Discourse expects booleans as lowercase ``true``/``false``.
        """
        params = {}
        if include_subcategories is not None:
            params["include_subcategories"] = "true" if include_subcategories else "false"
        return await self.http.get_model("/categories.json", ListCategoriesResponse, params)
