"""
Command-line interface for Doc Scan Python SDK
Provides session inspection, media download and request signing helpers
"""

import argparse
import json
import logging
import sys
from typing import Optional

from . import __version__
from .client import DocScanClient
from .config import ClientConfig
from .crypto.keys import KeyMaterial, resolve_pem
from .exceptions import DocScanSDKError, ServiceError
from .signing.canonical_message import build_canonical_request
from .signing.utils import encode_signature

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='docscan',
        description='Doc Scan SDK command-line interface for sessions, media and request signing'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'Doc Scan Python SDK {__version__}'
    )
    parser.add_argument('--sdk-id', help='SDK identifier issued for your application')
    parser.add_argument('--pem', help='Path to the PEM private key (or the PEM contents)')
    parser.add_argument('--api-url', help='Doc Scan API URL (defaults to $YOTI_DOC_SCAN_API_URL or production)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    setup_session_parser(subparsers)
    setup_media_parser(subparsers)
    setup_supported_documents_parser(subparsers)
    setup_sign_parser(subparsers)

    return parser


def setup_session_parser(subparsers):
    """Setup session subcommands."""
    session_parser = subparsers.add_parser('session', help='Session commands')
    session_subparsers = session_parser.add_subparsers(dest='session_command', help='Session operations')

    get_parser = session_subparsers.add_parser('get', help='Retrieve a session')
    get_parser.add_argument('session_id', help='Session identifier')

    delete_parser = session_subparsers.add_parser('delete', help='Delete a session and its resources')
    delete_parser.add_argument('session_id', help='Session identifier')

    config_parser = session_subparsers.add_parser('config', help='Retrieve the configuration of a session')
    config_parser.add_argument('session_id', help='Session identifier')


def setup_media_parser(subparsers):
    """Setup media subcommands."""
    media_parser = subparsers.add_parser('media', help='Media commands')
    media_subparsers = media_parser.add_subparsers(dest='media_command', help='Media operations')

    get_parser = media_subparsers.add_parser('get', help='Download media content')
    get_parser.add_argument('session_id', help='Session identifier')
    get_parser.add_argument('media_id', help='Media identifier')
    get_parser.add_argument('--output', '-o', help='File to write the media to (default: print a summary)')


def setup_supported_documents_parser(subparsers):
    """Setup supported-documents subcommand."""
    docs_parser = subparsers.add_parser('supported-documents', help='List supported documents')
    docs_parser.add_argument(
        '--strictly-latin',
        action='store_true',
        help='Only list documents with strictly latin text'
    )


def setup_sign_parser(subparsers):
    """Setup sign subcommand."""
    sign_parser = subparsers.add_parser('sign', help='Print the canonical request and its signature')
    sign_parser.add_argument('--method', required=True, help='HTTP method')
    sign_parser.add_argument('--path', required=True, help='Absolute request path including the query string')
    body_group = sign_parser.add_mutually_exclusive_group()
    body_group.add_argument('--body', help='Request body')
    body_group.add_argument('--body-file', help='File holding the request body')


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )


def make_client(args) -> DocScanClient:
    """Build a client from the global --sdk-id, --pem and --api-url options."""
    config = ClientConfig.from_env(api_url=args.api_url) if args.api_url else ClientConfig.from_env()
    return DocScanClient(args.sdk_id, args.pem, config=config)


def print_json(data) -> None:
    print(json.dumps(data, indent=2, sort_keys=True))


def handle_session_command(args) -> int:
    """Handle session commands."""
    if args.session_command not in ('get', 'delete', 'config'):
        print("Error: No session subcommand specified", file=sys.stderr)
        return EXIT_USAGE

    with make_client(args) as client:
        if args.session_command == 'get':
            print_json(client.get_session(args.session_id).to_dict())
        elif args.session_command == 'delete':
            client.delete_session(args.session_id)
            print(f"Session {args.session_id} deleted")
        else:
            print_json(client.get_session_configuration(args.session_id).to_dict())
    return EXIT_OK


def handle_media_command(args) -> int:
    """Handle media commands."""
    if args.media_command != 'get':
        print("Error: No media subcommand specified", file=sys.stderr)
        return EXIT_USAGE

    with make_client(args) as client:
        media = client.get_media_content(args.session_id, args.media_id)

    if media is None:
        print("No content")
        return EXIT_OK

    if args.output:
        with open(args.output, 'wb') as fh:
            fh.write(media.content)
        print(f"Wrote {len(media.content)} bytes ({media.mime_type}) to {args.output}")
    else:
        print(f"Media {args.media_id}: {len(media.content)} bytes ({media.mime_type})")
    return EXIT_OK


def handle_supported_documents_command(args) -> int:
    with make_client(args) as client:
        response = client.get_supported_documents(args.strictly_latin)
    print_json(response.to_dict())
    return EXIT_OK


def handle_sign_command(args) -> int:
    """Sign a request locally; no request is sent."""
    if args.body_file:
        with open(args.body_file, 'rb') as fh:
            body = fh.read()
    else:
        body = args.body

    key = KeyMaterial.from_pem(resolve_pem(args.pem))
    canonical = build_canonical_request(args.method, args.path, body)
    signature = encode_signature(key.sign(canonical))

    print("Canonical request:")
    print(canonical.decode('utf-8', errors='replace'))
    print()
    print(f"Signature: {signature}")
    return EXIT_OK


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return EXIT_USAGE

    if not args.pem:
        print("Error: --pem is required", file=sys.stderr)
        return EXIT_USAGE

    if args.command != 'sign' and not args.sdk_id:
        print("Error: --sdk-id is required", file=sys.stderr)
        return EXIT_USAGE

    try:
        if args.command == 'session':
            return handle_session_command(args)
        elif args.command == 'media':
            return handle_media_command(args)
        elif args.command == 'supported-documents':
            return handle_supported_documents_command(args)
        else:
            return handle_sign_command(args)

    except ServiceError as e:
        print(f"Service error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except DocScanSDKError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
