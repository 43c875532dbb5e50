#!/usr/bin/env python
"""
Development server for the records API

Usage:
    python run.py

Prints the registered routes, then serves on port 5001.
"""

from app import create_app

if __name__ == '__main__':
    app = create_app()

    print("\n=== Registered Routes ===")
    for rule in app.url_map.iter_rules():
        methods = ','.join(sorted(rule.methods - {'HEAD', 'OPTIONS'}))
        print(f"{methods:8s} {rule.rule:32s} -> {rule.endpoint}")
    print("=" * 70)

    app.run(host='0.0.0.0', port=5001, debug=True)
