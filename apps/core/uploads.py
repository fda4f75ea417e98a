# apps/core/uploads.py
import os
import random
import time
from django import forms
from django.conf import settings


def _unique_name(folder, prefix, filename):
    """profiles/profile-1718000000000-123456789.png"""
    ext = os.path.splitext(filename)[1].lower()
    suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}"
    return f"{folder}/{prefix}-{suffix}{ext}"


def profile_photo_path(instance, filename):
    return _unique_name('profiles', 'profile', filename)


def contact_photo_path(instance, filename):
    return _unique_name('contacts', 'contact', filename)


def validate_image_upload(upload):
    """Only jpeg/jpg/png/gif (extension and content type) up to UPLOAD_MAX_BYTES."""
    if upload is None:
        return upload

    allowed = settings.UPLOAD_IMAGE_EXTENSIONS
    ext = os.path.splitext(upload.name)[1].lower().lstrip('.')
    content_type = (getattr(upload, 'content_type', '') or '').lower()
    subtype = content_type.split('/')[-1]

    if ext not in allowed or subtype not in allowed:
        raise forms.ValidationError("Only image files are allowed")

    if upload.size > settings.UPLOAD_MAX_BYTES:
        raise forms.ValidationError("File is too large (max 5MB)")

    return upload


def delete_stored_file(storage, name):
    """Removes a stored upload by name; empty names are ignored."""
    if name:
        storage.delete(name)
