"""View rendering module for HTML pages.

Views assemble complete HTML documents from the shared Jinja2 templates
and static page bodies, separate from the routers.
"""
