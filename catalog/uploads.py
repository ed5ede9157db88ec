import logging
import os
import random
import time

from flask import Blueprint, current_app, send_from_directory

from .errors import UploadError

logger = logging.getLogger(__name__)

uploads_bp = Blueprint('uploads', __name__)


def _extension(filename: str) -> str:
    # Browsers on Windows may send a full client-side path
    base = filename.replace('\\', '/').rsplit('/', 1)[-1]
    return os.path.splitext(base)[1]


class UploadNamer:
    """Stores uploaded files under collision-resistant generated names.

    Names look like ``<field>-<unix-ms>-<random>.<ext>``; the returned path is
    always ``<url_prefix>/<name>`` regardless of the host OS.
    """

    def __init__(self, folder: str, url_prefix: str = '/uploads', clock=None, rng=None):
        self.folder = folder
        self.url_prefix = url_prefix.rstrip('/')
        self._clock = clock or time.time
        self._rng = rng or random.SystemRandom()

    def generate_name(self, field_name: str, original_filename: str) -> str:
        millis = int(self._clock() * 1000)
        suffix = self._rng.randrange(1_000_000_000)
        return f"{field_name}-{millis}-{suffix}{_extension(original_filename)}"

    def save(self, file) -> str | None:
        """Persist a werkzeug FileStorage and return its URL path.

        Returns None when no file part was sent.
        """
        if file is None or not file.filename:
            return None
        name = self.generate_name(file.name or 'image', file.filename)
        try:
            os.makedirs(self.folder, exist_ok=True)
            file.save(os.path.join(self.folder, name))
        except OSError as e:
            logger.warning("Could not store upload %s: %s", name, e)
            raise UploadError(str(e)) from e
        return f"{self.url_prefix}/{name}"


def get_upload_namer() -> UploadNamer:
    cfg = current_app.config
    return UploadNamer(cfg['UPLOAD_FOLDER'], cfg.get('UPLOAD_URL_PREFIX', '/uploads'))


@uploads_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
