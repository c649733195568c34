#!/usr/bin/env python3
"""Simple script to run the Flask application."""
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from waiver_edge.api.app import app

if __name__ == '__main__':
    host = os.environ.get('WAIVER_EDGE_HOST', '127.0.0.1')
    port = int(os.environ.get('WAIVER_EDGE_PORT', '5001'))
    debug = os.environ.get('WAIVER_EDGE_DEBUG', '1').lower() in ('1', 'true', 'yes')

    print("=" * 60)
    print("Waiver Edge - Fantasy Football Recommendations")
    print("=" * 60)
    print(f"\nStarting server on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    app.run(host=host, debug=debug, port=port)
