# Point GA4GH_CTS_CONFIGURATION at this file to configure a suite run
# from the environment, e.g. inside a container next to the server.
import os

# If the env variable GA4GH_CTS_URL_ROOT is set, test that server.
# Otherwise, test a server on the default port of this host.
URL_ROOT = os.getenv('GA4GH_CTS_URL_ROOT', "http://localhost:8000/")

# If the env variable GA4GH_CTS_KEY is set, send it with every request
AUTHENTICATION_KEY = os.getenv('GA4GH_CTS_KEY') or None
