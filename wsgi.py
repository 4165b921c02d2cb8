#!/usr/bin/env python3

import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
if os.path.exists('.env'):
    load_dotenv()
    logging.info("Environment variables loaded from .env file")

# Set up logging
logging.basicConfig(level=logging.INFO)

try:
    from homesite import create_app
    application = create_app()
    logging.info("homesite application loaded successfully")
except Exception as e:
    logging.error(f"Error loading application: {e}")
    raise

# `flask --app wsgi` looks for `app`
app = application

if __name__ == "__main__":
    application.run()
