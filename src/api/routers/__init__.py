# This file marks the routers package for HTTP route modules.
# It exists so the app factory can import route tables by a stable path.
