"""
Command-line interface for percolation_grid.

Commands:
    percolation-grid trial   --size 64 --fill bfs --seed 1
    percolation-grid compare --size 64 --seed 1 --output compare.csv
    percolation-grid compare --config run.yaml
    percolation-grid list
"""

import click
from pathlib import Path

from ..errors import FillMismatchError, PercolationError
from ..percolation import DEFAULT_FILL, FILL_STRATEGIES, Percolation
from ..union_find import DEFAULT_UNION_FIND, UNION_FIND_IMPLEMENTATIONS
from ..utils.timing import format_duration, speedup


@click.group()
@click.version_option()
def cli():
    """Percolation Grid - site percolation with interchangeable fill strategies."""
    pass


@cli.command('list')
def list_strategies():
    """List available fill strategies and union-find implementations."""
    click.echo("Fill strategies:")
    for name in FILL_STRATEGIES:
        marker = " (default)" if name == DEFAULT_FILL else ""
        click.echo(f"  {name}{marker}")
    click.echo("Union-find implementations:")
    for name in UNION_FIND_IMPLEMENTATIONS:
        marker = " (default)" if name == DEFAULT_UNION_FIND else ""
        click.echo(f"  {name}{marker}")


@cli.command('trial')
@click.option('--size', '-n', required=True, type=int, help='Grid size (rows = columns)')
@click.option('--fill', '-f', default=DEFAULT_FILL, type=click.Choice(list(FILL_STRATEGIES)),
              help='Fill strategy')
@click.option('--union-find', '-u', default=DEFAULT_UNION_FIND,
              type=click.Choice(list(UNION_FIND_IMPLEMENTATIONS)),
              help='Disjoint-set implementation (union-find fill only)')
@click.option('--seed', '-s', type=int, default=None, help='Seed for the open order')
def trial(size, fill, union_find, seed):
    """Open random sites until the grid percolates and report the threshold."""
    from ..run.trial import random_open_order, run_trial
    
    try:
        perc = Percolation(size, fill=fill,
                           union_find=union_find if fill == 'union-find' else None)
    except PercolationError as e:
        raise click.BadParameter(str(e), param_hint="'--size'")
    
    result = run_trial(perc, random_open_order(size, seed), union_find_name=union_find)
    
    label = fill if result.union_find is None else f"{fill} ({result.union_find})"
    click.echo(f"Fill:       {label}")
    click.echo(f"Grid:       {size}x{size}")
    click.echo(f"Open sites: {result.open_sites}")
    click.echo(f"Threshold:  {result.threshold:.4f}")
    click.echo(f"Elapsed:    {format_duration(result.elapsed_seconds)}")


@cli.command('compare')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Run config YAML')
@click.option('--size', '-n', type=int, default=None, help='Grid size (overrides config)')
@click.option('--fill', '-f', 'fills', multiple=True,
              type=click.Choice(list(FILL_STRATEGIES)),
              help='Fill strategy to include (repeatable, default: all)')
@click.option('--union-find', '-u', type=click.Choice(list(UNION_FIND_IMPLEMENTATIONS)),
              default=None, help='Disjoint-set implementation (overrides config)')
@click.option('--seed', '-s', type=int, default=None, help='Seed (overrides config)')
@click.option('--output', '-o', 'output_csv', type=click.Path(), default=None,
              help='Write results CSV (overrides config)')
@click.option('--no-verify', is_flag=True, help='Only compare percolates(), not full sites')
def compare(config_file, size, fills, union_find, seed, output_csv, no_verify):
    """Run one open order through several fill strategies and compare them."""
    from ..run.config import RunConfig
    from ..run.trial import compare_fills
    
    try:
        if config_file:
            config = RunConfig.from_yaml(config_file)
        elif size is not None:
            config = RunConfig({'size': size})
        else:
            raise click.UsageError("Provide --config or --size")
        
        config = config.with_overrides(
            size=size,
            fills=list(fills) if fills else None,
            union_find=union_find,
            seed=seed,
            output_csv=output_csv,
        )
    except ValueError as e:
        raise click.ClickException(f"Invalid run config: {e}")
    
    click.echo(f"=== {config.run_name} ===")
    click.echo(f"Grid: {config.size}x{config.size}, seed: {config.seed}")
    click.echo(f"Fills: {', '.join(config.fills)}")
    
    try:
        df = compare_fills(
            config.size,
            fills=config.fills,
            seed=config.seed,
            union_find=config.union_find,
            verify=not no_verify,
        )
    except FillMismatchError as e:
        raise click.ClickException(f"Fill strategies disagree: {e}")
    
    click.echo(f"Percolated after {df['open_sites'].iloc[0]} open sites "
               f"(threshold {df['threshold'].iloc[0]:.4f})")
    click.echo("")
    
    baseline = df['elapsed_seconds'].max()
    for _, row in df.iterrows():
        ratio = speedup(baseline, row['elapsed_seconds'])
        ratio_str = f"x{ratio:.1f}" if ratio is not None else "N/A"
        click.echo(f"  {row['fill']:<14} {format_duration(row['elapsed_seconds']):>10}  {ratio_str}")
    
    if config.output_csv:
        output_path = Path(config.output_csv)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)
        click.echo(f"\nSaved results to {output_path}")


if __name__ == '__main__':
    cli()
