"""Backup em arquivo dos pedidos."""

from app.infra.backup.file_backup_store import FileBackupStore

__all__ = ["FileBackupStore"]
