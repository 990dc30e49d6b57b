from django.core.management.base import BaseCommand, CommandError

from filter_schema.generators.exceptions import FilterSchemaError
from filter_schema.generators.filters import FilterSchemaBuilder
from filter_schema.generators.introspector import DjangoMetadataProvider


class Command(BaseCommand):
    help = "Print the filter condition and order-by input types of installed models as GraphQL SDL."

    def add_arguments(self, parser):
        parser.add_argument(
            "--app",
            dest="app_labels",
            action="append",
            default=[],
            help="Only include models from this app label (repeatable).",
        )
        parser.add_argument(
            "--schema",
            dest="schema_name",
            default="default",
            help="Schema name whose FILTER_SCHEMA settings apply (default: default).",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )

    def handle(self, *args, **options):
        schema_name = options["schema_name"]
        provider = DjangoMetadataProvider(schema_name=schema_name)
        try:
            entities = provider.get_entities(app_labels=options["app_labels"] or None)
            registry = FilterSchemaBuilder(
                settings=provider.settings, schema_name=schema_name
            ).build(entities)
            missing = registry.missing_references()
        except LookupError as e:
            raise CommandError(str(e))
        except FilterSchemaError as e:
            raise CommandError(f"Filter schema generation failed: {e}")

        if missing:
            self.stderr.write(
                self.style.WARNING(
                    f"Unresolved type references: {', '.join(sorted(missing))}"
                )
            )

        output = registry.to_sdl()
        if options["output_file"]:
            with open(options["output_file"], "w", encoding="utf-8") as f:
                f.write(output)
            self.stdout.write(self.style.SUCCESS(f"Filter schema written to {options['output_file']}"))
        else:
            self.stdout.write(output)
