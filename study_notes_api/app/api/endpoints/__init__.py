"""
Endpoint subpackage.

``content`` serves the subject/book/section/topic hierarchy and
``todos`` the to‑do list.  The routers are aggregated in
``api/router.py`` and mounted by the application factories.
"""
