"""Health check endpoint."""

from http.server import BaseHTTPRequestHandler
from datetime import datetime, timezone
import json

from src.utils.logging_config import SERVICE_NAME


class handler(BaseHTTPRequestHandler):
    """Health check handler for Vercel serverless function."""

    def do_GET(self):
        """Report liveness; no database round trip."""
        self.send_response(200)
        self.send_header('Content-Type', 'application/json')
        self.end_headers()
        response = json.dumps({
            "status": "ok",
            "service": SERVICE_NAME,
            "time": datetime.now(timezone.utc).isoformat(),
        })
        self.wfile.write(response.encode('utf-8'))

    def do_POST(self):
        """Handle POST request (same as GET for health check)."""
        self.do_GET()
