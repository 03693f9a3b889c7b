from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardPagination(PageNumberPagination):
    """
    Query params:
    - page: Page number (1-indexed)
    - limit: Items per page (default 12, max 50)
    """
    page_size = 12
    page_size_query_param = "limit"
    max_page_size = 50

    def get_paginated_response(self, data):
        return Response({
            "success": True,
            "page": self.page.number,
            "limit": self.get_page_size(self.request),
            "total": self.page.paginator.count,
            "items": data,
        })

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "success": {"type": "boolean"},
                "page": {"type": "integer"},
                "limit": {"type": "integer"},
                "total": {"type": "integer"},
                "items": schema,
            },
        }
