"""EXIF Paranoia application shell.

Translation resources live outside the package, under ``res/<locale>/messages.ftl``
relative to the working directory (see ``RESOURCES_DIR`` in the settings).
"""
