"""Run the mock API development server: ``python -m mock_api``."""

import os

from mock_api import create_app

app = create_app(os.getenv("FLASK_ENV", "development"))

if __name__ == "__main__":
    port = app.config["PORT"]
    print(f"Mock API server running at http://localhost:{port}")
    print(f"Health check: http://localhost:{port}/health")
    app.run(host="0.0.0.0", port=port, threaded=True, use_reloader=False)
