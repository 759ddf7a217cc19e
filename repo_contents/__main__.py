import argparse
import asyncio
import json
import logging
import os

from .encoding import encode_content, read_content
from .errors import InvalidArgument
from .schemas import (
    CommitRequest,
    CreateFileRequest,
    DeleteFileRequest,
    Signature,
    UpdateFileRequest,
)

logger = logging.getLogger(__name__)

common = argparse.ArgumentParser(add_help=False)
common.add_argument('-m', '--message', required=True)
common.add_argument('-b', '--branch')
common.add_argument('--author-name')
common.add_argument('--author-email')
common.add_argument('--committer-name')
common.add_argument('--committer-email')
common.add_argument('-v', '--verbose', action='store_true')

content_args = argparse.ArgumentParser(add_help=False)
source = content_args.add_mutually_exclusive_group()
source.add_argument('-f', '--content-file')
source.add_argument('-c', '--content')

sha_args = argparse.ArgumentParser(add_help=False)
sha_args.add_argument('-s', '--sha', required=True)

parser = argparse.ArgumentParser(
    prog='repo_contents',
    description='Print the request body for a repository contents commit.',
)
subparsers = parser.add_subparsers(dest='kind', required=True)
subparsers.add_parser('create', parents=[common, content_args])
subparsers.add_parser('update', parents=[common, content_args, sha_args])
subparsers.add_parser('delete', parents=[common, sha_args])


def signature(role: str, name: str | None, email: str | None) -> Signature | None:
    if name is None and email is None:
        return None
    if name is None or email is None:
        raise InvalidArgument(role, 'name and email must be given together')
    return Signature(name=name, email=email)


def default_committer() -> Signature | None:
    name = os.getenv('COMMITTER_NAME')
    email = os.getenv('COMMITTER_EMAIL')
    if not name or not email:
        return None
    return Signature(name=name, email=email)


async def load_content(args: argparse.Namespace) -> str:
    if args.content_file is None:
        return encode_content((args.content or '').encode())
    if not os.path.isfile(args.content_file):
        raise ValueError("Content file doesn't exist")
    logger.debug('Reading content from %s', args.content_file)
    return await read_content(args.content_file)


async def build_request(args: argparse.Namespace) -> CommitRequest:
    options = {
        'branch': args.branch or os.getenv('CONTENTS_BRANCH'),
        'author': signature('author', args.author_name, args.author_email),
        'committer': (
            signature('committer', args.committer_name, args.committer_email)
            or default_committer()
        ),
    }
    if args.kind == 'delete':
        return DeleteFileRequest(args.message, args.sha, **options)
    content = await load_content(args)
    if args.kind == 'update':
        return UpdateFileRequest(args.message, content, args.sha, **options)
    return CreateFileRequest(args.message, content, **options)


async def main(argv: list[str] | None = None) -> None:
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s: %(message)s',
    )
    try:
        request = await build_request(args)
    except InvalidArgument as err:
        parser.error(str(err))
    logger.debug('Built %s request: %s', args.kind, request.message)
    print(json.dumps(request.payload(), indent=2))


def run() -> None:
    asyncio.run(main())


if __name__ == '__main__':
    run()
