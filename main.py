# main.py
import logging

from flask import Flask, render_template, request

import config
from browser import build_page
from models import OutcomeKind

app = Flask(__name__)


@app.route("/")
def home():
    page = build_page(
        config.DATABASE_URL,
        selected=request.args.get("table", ""),
        raw=request.args.get("raw", ""),
        allow_demo=config.ALLOW_UNSAFE_DEMO,
        schema=config.TARGET_SCHEMA,
    )
    return render_template("index.html", page=page, kinds=OutcomeKind, schema=config.TARGET_SCHEMA)


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if config.ALLOW_UNSAFE_DEMO:
        logging.getLogger(__name__).warning("ALLOW_UNSAFE_DEMO=1: SQL injection demo is enabled")
    app.run(host=config.APP_HOST, port=config.APP_PORT)
