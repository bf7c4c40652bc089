from django.core.management.base import BaseCommand, CommandError

from ...core.exceptions import AugmentationError
from ...core.schema import augment_schema_sdl
from ...core.settings import AugmentationSettings


class Command(BaseCommand):
    help = "Add relationship mutations to a GraphQL SDL file and print the result."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Path to the SDL type definitions.")
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )
        parser.add_argument(
            "--schema",
            dest="schema_name",
            default="default",
            help="Settings section to use (default: default).",
        )

    def handle(self, *args, **options):
        try:
            with open(options["path"], "r", encoding="utf-8") as f:
                type_defs = f.read()
        except OSError as e:
            raise CommandError(f"Could not read {options['path']}: {e}")

        settings = AugmentationSettings.from_schema(options["schema_name"])
        try:
            output = augment_schema_sdl(type_defs, settings)
        except AugmentationError as e:
            raise CommandError(str(e))

        if options["output_file"]:
            with open(options["output_file"], "w", encoding="utf-8") as f:
                f.write(output)
            self.stdout.write(
                self.style.SUCCESS(f"Schema written to {options['output_file']}")
            )
        else:
            self.stdout.write(output)
