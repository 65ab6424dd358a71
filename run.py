#!/usr/bin/env python3
"""
Student Accounts API Entry Point

Starts the FastAPI server with the host and port from configuration.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from student_accounts.api import run_server
from student_accounts.config import get_config
from student_accounts.logging_config import setup_logging


if __name__ == "__main__":
    cfg = get_config()
    setup_logging(cfg.log_level, log_format=cfg.log_format, log_file=cfg.log_file)

    print("Starting Student Accounts API...")
    print(f"API available at: http://localhost:{cfg.api_port}")
    print(f"Documentation at: http://localhost:{cfg.api_port}/docs")
    print()

    try:
        run_server(host=cfg.api_host, port=cfg.api_port, debug=False)
    except KeyboardInterrupt:
        print("\nShutting down Student Accounts API...")
    except Exception as e:
        print(f"Error starting server: {e}")
        sys.exit(1)
