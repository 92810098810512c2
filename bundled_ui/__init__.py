"""Pre-built frontend shipped as package data under ``dist/``.

The directory is produced by ``npm run build`` and copied here before the
distribution is built; nothing in it is generated or modified at runtime.
"""
