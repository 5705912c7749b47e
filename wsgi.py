from werkzeug.middleware.proxy_fix import ProxyFix
from app import create_app

app = create_app()

# number of reverse proxies in front of the app (0 disables header trust)
hops = app.config.get("PROXY_HOPS", 1)
if hops:
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=hops, x_for=hops, x_host=hops, x_port=hops, x_prefix=hops)
