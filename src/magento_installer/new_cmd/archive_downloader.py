"""Fetch the application archive over HTTP, reporting progress as it streams."""

import hashlib
import os
import time
import uuid

import httpx

from magento_installer.errors import DownloadError

CHUNK_SIZE = 8192
DOWNLOAD_TIMEOUT = 60


def make_archive_filename(cwd):
    """Generate a collision-free temporary archive path inside *cwd*."""
    token = hashlib.md5(f"{time.time()}{uuid.uuid4().hex}".encode()).hexdigest()
    return os.path.join(cwd, f"magento_{token}.tar.gz")


def format_progress(downloaded, total):
    """Render a progress line: `downloaded / total | percent`, sizes in MB."""
    downloaded_mb = downloaded / 1024 / 1024
    if not total:
        return f"{downloaded_mb:,.2f}MB / ? MB | 0 %\r"
    total_mb = total / 1024 / 1024
    percent = downloaded / total * 100
    return f"{downloaded_mb:,.2f}MB / {total_mb:,.2f}MB | {percent:.2f} %\r"


class ProgressPrinter:
    """Progress observer writing one carriage-returned line per chunk."""

    def __init__(self, write):
        self._write = write

    def __call__(self, downloaded, total):
        self._write(format_progress(downloaded, total))


class ArchiveDownloader:
    """Streams an archive URL to a local file.

    The transport is an injected httpx.Client so tests can substitute
    an httpx.MockTransport.
    """

    def __init__(self, client=None):
        self._client = client

    def download(self, url, destination, on_progress=None):
        """Stream *url* into *destination*.

        Args:
            url: Archive URL
            destination: Local file path to write
            on_progress: Optional callable(downloaded_bytes, total_bytes_or_None)

        Raises:
            DownloadError: On transport failure or a non-success status
        """
        client = self._client or httpx.Client()
        try:
            with client.stream(
                "GET", url, timeout=DOWNLOAD_TIMEOUT, follow_redirects=True,
            ) as response:
                if response.status_code != 200:
                    raise DownloadError(
                        f"Download of {url} failed with HTTP {response.status_code}",
                        context={"url": url, "status_code": response.status_code},
                    )
                total = _content_length(response)
                downloaded = 0
                with open(destination, "wb") as f:
                    for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                        f.write(chunk)
                        downloaded += len(chunk)
                        if on_progress is not None:
                            on_progress(downloaded, total)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DownloadError(f"Download of {url} failed: {e}", context={"url": url}) from e
        except OSError as e:
            raise DownloadError(f"Could not write {destination}: {e}", context={"url": url}) from e
        finally:
            if self._client is None:
                client.close()


def _content_length(response):
    value = response.headers.get("content-length")
    if not value:
        return None
    try:
        total = int(value)
    except ValueError:
        return None
    return total or None
