"""
Command-line interface for converting normalized compose services to
Kubernetes resources.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError

from compose2kube.core.exceptions import (
    ChartGenerationError,
    RestartPolicyError,
    SerializationError,
    ServiceModelLoadError,
)
from compose2kube.emitter.emission import ResourceEmitter
from compose2kube.io.file_loader import ServiceModelLoader
from compose2kube.models.options import ConvertOptions
from compose2kube.transformer.kubernetes import KubernetesTransformer

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_USAGE_ERROR = 2  # argparse
EXIT_RESTART_POLICY_ERROR = 3
EXIT_SERIALIZATION_ERROR = 4
EXIT_CHART_ERROR = 5
EXIT_FILE_SYSTEM_ERROR = 8
EXIT_UNEXPECTED_ERROR = 9


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging with timestamps if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    # Resources may go to stdout, so diagnostics stay on stderr
    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compose2kube",
        description="Convert normalized compose services to Kubernetes resources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One JSON Deployment (+ Service) file per service in the current directory
  compose2kube services.yaml

  # YAML DaemonSets on stdout
  compose2kube --daemon-set --yaml --stdout services.yaml

  # Deployments and ReplicationControllers packaged as a Helm chart
  compose2kube -d --replication-controller --chart -y services.yaml
        """,
    )

    parser.add_argument(
        "input_file",
        type=Path,
        help="YAML or JSON file with a top-level 'services' mapping",
    )

    parser.add_argument(
        "--replicas",
        type=int,
        default=1,
        help="Replica count for ReplicationControllers and Deployments (default: 1)",
    )
    parser.add_argument(
        "-d",
        "--deployment",
        action="store_true",
        help="Generate Deployments (default when no kind is selected)",
    )
    parser.add_argument(
        "--daemon-set", action="store_true", help="Generate DaemonSets"
    )
    parser.add_argument(
        "--replication-controller",
        action="store_true",
        help="Generate ReplicationControllers",
    )
    parser.add_argument(
        "--deployment-config",
        action="store_true",
        help="Generate OpenShift DeploymentConfigs",
    )
    parser.add_argument(
        "-c", "--chart", action="store_true", help="Package output as a Helm chart"
    )
    parser.add_argument(
        "-y", "--yaml", action="store_true", help="Generate YAML instead of JSON"
    )
    parser.add_argument(
        "--stdout", action="store_true", help="Print resources to stdout"
    )
    parser.add_argument(
        "-o", "--out", type=Path, help="Write every resource into a single file"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for per-resource files and charts (default: cwd)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    return parser


def options_from_args(args: argparse.Namespace) -> ConvertOptions:
    """Build validated run options from parsed arguments."""
    return ConvertOptions(
        replicas=args.replicas,
        create_deployment=args.deployment,
        create_daemon_set=args.daemon_set,
        create_replication_controller=args.replication_controller,
        create_deployment_config=args.deployment_config,
        create_chart=args.chart,
        generate_yaml=args.yaml,
        to_stdout=args.stdout,
        out_file=args.out,
        input_file=args.input_file,
    )


def run_conversion(
    options: ConvertOptions, output_dir: Path | None = None, debug: bool = False
) -> int:
    """Load, transform and emit. Returns the process exit code."""
    logger = logging.getLogger(__name__)

    try:
        model = ServiceModelLoader.load(options.input_file)

        transformer = KubernetesTransformer()
        bundle = transformer.transform(model.services, options)

        emitter = ResourceEmitter(output_dir=output_dir)
        if options.out_file is not None:
            options.out_file.parent.mkdir(parents=True, exist_ok=True)
            with options.out_file.open("w", encoding="utf-8") as f:
                emitter.emit(bundle, options, stream=f)
            print(f'file "{options.out_file}" created')
        else:
            emitter.emit(bundle, options)

        return EXIT_OK

    except ServiceModelLoadError as e:
        logger.error(f"Input error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        return EXIT_INPUT_ERROR
    except RestartPolicyError as e:
        logger.error(f"Configuration error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        return EXIT_RESTART_POLICY_ERROR
    except SerializationError as e:
        logger.error(f"Serialization error: {e}")
        return EXIT_SERIALIZATION_ERROR
    except ChartGenerationError as e:
        logger.error(f"Failed to create Chart data: {e}")
        return EXIT_CHART_ERROR
    except (PermissionError, FileNotFoundError, OSError) as e:
        logger.error(f"File system error: {e}")
        return EXIT_FILE_SYSTEM_ERROR
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if debug:
            logger.exception("Full traceback:")
        return EXIT_UNEXPECTED_ERROR


def main(argv: list[str] | None = None) -> NoReturn:
    """Entry point of the compose2kube command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug, args.verbose)

    try:
        options = options_from_args(args)
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        parser.error(errors)

    sys.exit(run_conversion(options, output_dir=args.output_dir, debug=args.debug))


if __name__ == "__main__":
    main()
