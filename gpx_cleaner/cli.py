import argparse
import logging
import os

from gpx_cleaner.config import Config
from gpx_cleaner.exporting import export_coordinates_cfg
from gpx_cleaner.files import clean_file
from gpx_cleaner.logging_utils import setup_logging
from gpx_cleaner.naming import build_run_dir
from gpx_cleaner.plotting import plot_comparison

logger = logging.getLogger(__name__)


def run(cfg, config_path=None):
    """Run one cleaning pass as described by ``cfg``.

    Everything is written into a fresh run directory under
    ``output.output_dir``. Returns that directory.
    """
    out_dir = build_run_dir(cfg, cfg.get('output', 'output_dir'))
    os.makedirs(out_dir, exist_ok=True)
    setup_logging(out_dir, cfg.get('logging', 'level', default='INFO'))

    # Save the config used for this run
    with open(os.path.join(out_dir, 'config_used.txt'), 'w') as f_out:
        if config_path is not None:
            with open(config_path, 'r') as f_in:
                f_out.write(f_in.read())
        else:
            f_out.write(cfg.as_yaml())

    input_path = cfg.get('input_file')
    if not input_path:
        raise ValueError("input_file is not set in the configuration")

    session = clean_file(
        input_path,
        out_dir,
        cfg.get('trim', 'start_points', default=0),
        cfg.get('trim', 'end_points', default=0),
        os.path.join(out_dir, 'summary.txt'),
    )

    if cfg.get('output', 'plot'):
        plot_comparison(
            session.original_coords,
            session.cleaned_coords,
            os.path.join(out_dir, 'comparison.png'),
            full_size=cfg.get('output', 'full_size_plots', default=False),
        )

    export_coordinates_cfg(
        {'original': session.original_coords, 'cleaned': session.cleaned_coords},
        cfg,
        out_dir=out_dir,
    )
    logger.info(session.summary().message())
    return out_dir


def main(argv=None):
    parser = argparse.ArgumentParser(description="GPX cleaning pipeline")
    parser.add_argument(
        '-c', '--config',
        default='config.yaml',
        help="Path to YAML config file"
    )
    args = parser.parse_args(argv)

    # Load configuration
    cfg = Config(args.config)

    try:
        run(cfg, args.config)
    except (ValueError, OSError) as exc:
        logger.error("Error processing GPX file: %s", exc)
        return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
