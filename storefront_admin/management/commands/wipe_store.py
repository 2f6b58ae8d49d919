# storefront_admin/management/commands/wipe_store.py

from django.core.management.base import BaseCommand

from storefront_admin.persistence import DatabaseSlots
from storefront_admin.storefront import Storefront


class Command(BaseCommand):
    help = "Reset the store to the demo document. The admin password is left alone."

    def add_arguments(self, parser):
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Required safety flag. Without this, the command will not run.",
        )

    def handle(self, *args, **options):
        if not options.get("yes"):
            self.stdout.write(self.style.ERROR("Refusing to run without --yes"))
            self.stdout.write("Example: python manage.py wipe_store --yes")
            return

        sf = Storefront(DatabaseSlots(), confirm=lambda prompt: True).start(render=False)
        sf.wipe()
        self.stdout.write(self.style.SUCCESS("Local store reset."))
