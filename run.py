#!/usr/bin/env python3
"""
Back-office gateway
Flask backend-for-frontend for the back-office UI.
"""

import logging

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from backoffice.api.main import main

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


if __name__ == '__main__':
    main()
