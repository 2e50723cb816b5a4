from rest_framework.pagination import PageNumberPagination


class StandardPagination(PageNumberPagination):
    """
    Default page-number pagination for list endpoints.

    Clients may ask for up to ``max_page_size`` rows with ``?page_size=``.
    """

    page_size = 25
    page_size_query_param = "page_size"
    max_page_size = 200
