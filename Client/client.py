"""
PluginUpdater Client - Main Entry Point

Command-line entry point for checking a plugin against its update server.

Author: PluginUpdater Project
"""

import sys
import argparse


def main(argv=None):
    """
    Main entry point for PluginUpdater client.

    Parses command-line arguments and runs one operation:
    - check: ask the server whether a newer version exists
    - info: print the plugin's metadata record
    - purge: drop the cached server response
    - set-license: store the license key in the OS credential store
    """
    parser = argparse.ArgumentParser(
        description='PluginUpdater - Plugin update checker client'
    )

    parser.add_argument('operation', choices=['check', 'info', 'purge', 'set-license'],
                        help='Operation to perform')

    parser.add_argument('--license-key',
                        help='License key (stored by set-license, overrides the stored key otherwise)')

    args = parser.parse_args(argv)

    from cli import run_cli_operation
    return run_cli_operation(args.operation, args.license_key)


if __name__ == '__main__':
    sys.exit(main())
