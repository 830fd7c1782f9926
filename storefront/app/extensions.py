from flask_cors import CORS

from storefront.client.client import StorefrontClient

# Singletons (initialized in app factory)
cors = CORS()
client = StorefrontClient()
