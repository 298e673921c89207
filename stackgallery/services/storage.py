import base64
import os
from werkzeug.utils import secure_filename
from flask import current_app
import boto3
from botocore.client import Config


def _local_root():
    d = os.path.abspath(current_app.config['LOCAL_STORAGE_DIR'])
    os.makedirs(d, exist_ok=True)
    return d


def _public_prefix():
    return current_app.config.get('PUBLIC_MEDIA_PREFIX', '/userData').rstrip('/')


def _s3_client():
    # endpoint_url may be empty in AWS-managed S3
    s3_kwargs = {}
    endpoint = current_app.config.get('S3_ENDPOINT')
    if endpoint:
        s3_kwargs['endpoint_url'] = endpoint
    region = current_app.config.get('S3_REGION')
    if region:
        s3_kwargs['region_name'] = region

    s3_config = Config(signature_version='s3v4', s3={'addressing_style': 'virtual'})
    return boto3.client(
        's3',
        aws_access_key_id=current_app.config.get('S3_ACCESS_KEY'),
        aws_secret_access_key=current_app.config.get('S3_SECRET_KEY'),
        config=s3_config,
        **s3_kwargs,
    )


def _save_local(file_storage, key):
    path = os.path.join(_local_root(), key)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    file_storage.save(path)
    return f"{_public_prefix()}/{key}"


def save_file(file_storage, prefix=""):
    """Store an upload and return where clients can fetch it.

    Local files come back as ``/userData/<prefix>/<name>``; S3 objects as
    ``s3://bucket/key``.
    """
    backend = current_app.config.get('STORAGE_BACKEND', 'local')
    filename = secure_filename(file_storage.filename or '')
    if not filename:
        raise ValueError("Uploaded file has no usable name")
    prefix = secure_filename(prefix) if prefix else ""
    key = f"{prefix}/{filename}" if prefix else filename

    if backend == 's3':
        bucket = current_app.config.get('S3_BUCKET')
        stream = getattr(file_storage, 'stream', file_storage)
        try:
            _s3_client().upload_fileobj(stream, bucket, key)
            return f"s3://{bucket}/{key}"
        except Exception as e:
            current_app.logger.exception('S3 upload failed, falling back to local storage: %s', e)
            stream.seek(0)
            return _save_local(file_storage, key)
    return _save_local(file_storage, key)


def delete_file(location: str) -> bool:
    """Remove a stored file. Returns False when there was nothing to remove."""
    if not location:
        return False
    if location.startswith('s3://'):
        bucket, key = location.replace('s3://', '').split('/', 1)
        _s3_client().delete_object(Bucket=bucket, Key=key)
        return True
    prefix = _public_prefix() + '/'
    if location.startswith(prefix):
        root = _local_root()
        path = os.path.abspath(os.path.join(root, location[len(prefix):]))
        # never step outside the storage root
        if not path.startswith(root + os.sep):
            raise ValueError("Refusing to delete outside storage root")
        if os.path.exists(path):
            os.remove(path)
            return True
        return False
    # external URLs and data URIs are not ours to delete
    return False


def file_size(file_storage) -> int:
    stream = getattr(file_storage, 'stream', file_storage)
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def to_data_uri(file_storage) -> str:
    stream = getattr(file_storage, 'stream', file_storage)
    raw = stream.read()
    mimetype = file_storage.mimetype or 'application/octet-stream'
    return f"data:{mimetype};base64,{base64.b64encode(raw).decode('ascii')}"
