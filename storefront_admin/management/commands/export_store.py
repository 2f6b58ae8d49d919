# storefront_admin/management/commands/export_store.py

from pathlib import Path

from django.core.management.base import BaseCommand

from storefront_admin.backup import STORE_BACKUP_FILENAME
from storefront_admin.persistence import DatabaseSlots
from storefront_admin.storefront import Storefront


class Command(BaseCommand):
    help = "Write the whole store document as pretty-printed JSON (stdout or --output)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--output",
            nargs="?",
            const=STORE_BACKUP_FILENAME,
            help=f"Write to this file instead of stdout (default name: {STORE_BACKUP_FILENAME}).",
        )

    def handle(self, *args, **options):
        sf = Storefront(DatabaseSlots()).start(render=False)
        body = sf.export_store()

        output = options.get("output")
        if not output:
            self.stdout.write(body)
            return

        Path(output).write_text(body, encoding="utf-8")
        self.stdout.write(self.style.SUCCESS(f"Store exported to {output}"))
