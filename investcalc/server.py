#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -e ".[test]"
#setup: flask --app investcalc.server run --port 5000 --debug

from __future__ import annotations

from investcalc.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=3000, debug=True)
