"""
run.py — development entry point for the CertifyMe API.

    python backend/run.py
    # or
    flask --app backend/run.py run
"""
import os

from certifyme import create_app

app = create_app()

if __name__ == "__main__":
    app.run(
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "5000")),
    )
