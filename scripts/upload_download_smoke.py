"""Smoke test against a running server: upload a directory, download it back.

Needs httpx (`pip install -e ".[scripts]"`). Run from the repository root
while the server is up:

    python scripts/upload_download_smoke.py
    python scripts/upload_download_smoke.py --source test-upload-files --url http://localhost:8080

Every file in ``--source`` is POSTed to /upload as form field ``file``; then every
file in ``--storage`` (the server's storage directory) is fetched from
/download/<name>. Responses are printed as they arrive.
"""

from __future__ import annotations

import argparse
import os
import sys

import httpx


def _upload_all(client: httpx.Client, source_dir: str) -> None:
    for fn in sorted(os.listdir(source_dir)):
        p = os.path.join(source_dir, fn)
        if not os.path.isfile(p):
            continue
        with open(p, "rb") as fh:
            resp = client.post("/upload", files={"file": (fn, fh)})
        print(resp.text)


def _download_all(client: httpx.Client, storage_dir: str) -> None:
    for fn in sorted(os.listdir(storage_dir)):
        resp = client.get(f"/download/{fn}")
        print(resp.text)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--url", default="http://localhost:8080")
    ap.add_argument("--source", default="test-upload-files", help="directory of files to upload")
    ap.add_argument("--storage", default="files", help="server storage directory to download from")
    args = ap.parse_args(argv)

    if not os.path.isdir(args.source):
        print(f"Source directory not found: {args.source}", file=sys.stderr)
        return 1

    try:
        with httpx.Client(base_url=args.url) as client:
            _upload_all(client, args.source)
            if os.path.isdir(args.storage):
                _download_all(client, args.storage)
    except httpx.HTTPError as e:
        print(f"Request failed: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
