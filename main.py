"""Local / serverless entrypoint.

Hosts that look for an ``app`` object in ``main.py`` pick this up.
"""

from quantum_lottery import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=False)
