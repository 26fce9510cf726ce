"""
shopblog.api.routers

Resource routers: one module per resource, each exposing the standard
list/show/create/update/delete endpoints.
"""

# Package marker.
