"""Server-wide constants and configuration defaults."""

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Flutter web build output, relative to the working directory
DEFAULT_ASSETS_DIR = "build/web"

# Served for every path that does not match a file (client-side routing)
FALLBACK_DOCUMENT = "index.html"

FALLBACK_MIMETYPE = "application/octet-stream"

# Explicit types for what a web build emits, so results don't depend on the
# platform's mimetypes registry (e.g. `.js` is `text/javascript` on some systems)
MIMETYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".map": "application/json",
    ".wasm": "application/wasm",
    ".txt": "text/plain",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".webp": "image/webp",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "application/vnd.ms-fontobject",
}
