"""Build command: synthesize trait landscapes from a landscape spec file."""

import random
from pathlib import Path

import typer

from ...config import get_config
from ...core.models import ConfigurationError, LandscapeOptions, LandscapeSpec
from ...engine import InMemoryTraitEngine
from ...landscape import CollaboratorInstallError, set_trait_landscape
from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output, format_effect


@app.command("build")
def build_command(
    spec_file: Path = typer.Argument(..., help="Landscape spec YAML file"),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed for reproducibility"
    ),
    genome_length: int | None = typer.Option(
        None, "--genome-length", "-L", help="Override the genome length"
    ),
    treatment: float | None = typer.Option(
        None, "--treatment", help="Weight of the resistance trait in fitness"
    ),
):
    """
    Build every trait listed in a landscape spec into a reference engine.

    Values missing from the spec file fall back to the genoscape config
    (see `genoscape config show`). A spec without traits builds the
    replication (0) and resistance (1) traits with default options.

    EXIT CODES:
        0 = Success
        1 = Configuration error
        2 = Install error
        3 = File not found

    Examples:
        genoscape build landscape.yaml
        genoscape build landscape.yaml --seed 42 -L 3000
        genoscape --json build landscape.yaml
    """
    out = Output(console=console, json_mode=get_json_mode())

    if not spec_file.exists():
        out.error(
            f"Spec file not found: {spec_file}", exit_code=ExitCode.FILE_NOT_FOUND
        )
        raise typer.Exit(out.finish())

    try:
        spec = LandscapeSpec.from_yaml(spec_file)
    except ConfigurationError as exc:
        out.error(str(exc), parameter=exc.parameter, trait=exc.trait)
        raise typer.Exit(out.finish())
    except OSError as exc:
        out.error(f"Failed to read landscape spec: {exc}")
        raise typer.Exit(out.finish())

    defaults = get_config().defaults
    length = _first_set(genome_length, spec.genome_length, defaults.genome_length)
    if length <= 0:
        out.error(
            f"Genome length must be positive, got {length}",
            parameter="genome_length",
        )
        raise typer.Exit(out.finish())
    run_seed = _first_set(seed, spec.seed, defaults.seed)
    if run_seed is None:
        run_seed = random.randint(0, 2**31 - 1)
    region = spec.region or defaults.region
    traits = spec.traits or [
        LandscapeOptions(traitnumber=0),
        LandscapeOptions(traitnumber=1),
    ]

    engine = InMemoryTraitEngine(
        genome_length=length,
        number_of_traits=max(2, max(t.traitnumber for t in traits) + 1),
        treatment=_first_set(treatment, spec.treatment, defaults.treatment),
    )
    rng = random.Random(run_seed)

    rows = []
    for options in traits:
        try:
            landscape = set_trait_landscape(
                engine, rng=rng, region=region, **options.model_dump()
            )
        except ConfigurationError as exc:
            out.error(str(exc), parameter=exc.parameter, trait=exc.trait)
            raise typer.Exit(out.finish())
        except CollaboratorInstallError as exc:
            out.error(str(exc), trait=exc.trait, exit_code=ExitCode.INSTALL_ERROR)
            raise typer.Exit(out.finish())

        summary = landscape.summary()
        counts = summary["categories"]
        rows.append(
            [
                f"{landscape.trait} ({landscape.name})",
                str(counts["lethal"]),
                str(counts["deleterious"]),
                str(counts["adaptive"]),
                str(counts["env"]),
                str(counts["neutral"]),
                str(summary["epistatic_terms"]),
                format_effect(summary["min_effect"]),
                format_effect(summary["max_effect"]),
            ]
        )

    out.success(
        f"Built {len(rows)} trait landscapes (L={length}, seed={run_seed})",
        genome_length=length,
        seed=run_seed,
        region=region,
    )
    out.table(
        "Trait landscapes",
        [
            "Trait",
            "Lethal",
            "Deleterious",
            "Adaptive",
            "Env",
            "Neutral",
            "Terms",
            "Min effect",
            "Max effect",
        ],
        rows,
        data_key="traits",
    )

    wild_type = engine.fitness[0]
    out.set_data("wild_type_fitness", wild_type)
    out.text(f"Wild-type fitness: {format_effect(wild_type)}")
    raise typer.Exit(out.finish())


def _first_set(*values):
    for value in values:
        if value is not None:
            return value
    return None
