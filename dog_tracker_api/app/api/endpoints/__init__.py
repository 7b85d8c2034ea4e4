"""
Endpoint subpackage.

``dogs`` holds the JSON routes and ``pages`` the rendered HTML routes.
Both routers are aggregated in ``api/router.py``.
"""
