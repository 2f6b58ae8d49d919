# storefront_admin/management/commands/import_store.py

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from storefront_admin.exceptions import StorefrontError
from storefront_admin.persistence import DatabaseSlots
from storefront_admin.storefront import Storefront


class Command(BaseCommand):
    help = "Replace the stored document with a JSON backup. Missing keys fall back to the demo defaults."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Backup file produced by export_store.")
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Required safety flag. Without this, the command will not run.",
        )

    def handle(self, *args, **options):
        path = Path(options["path"])
        if not path.is_file():
            raise CommandError(f"No such file: {path}")

        if not options.get("yes"):
            self.stdout.write(self.style.ERROR("Refusing to replace the store without --yes"))
            return

        sf = Storefront(DatabaseSlots(), confirm=lambda prompt: True).start(render=False)
        try:
            state = sf.import_store(path.read_bytes())
        except StorefrontError as e:
            raise CommandError(e.message)

        self.stdout.write(self.style.SUCCESS(f"Store imported ({len(state)} top-level keys)."))
