"""
Main entry point for running the package directly:

    python -m vpn_servername wg0.conf us_california-lax.pia.privateinternetaccess.com
"""

from .cli import run

if __name__ == "__main__":
    run()
