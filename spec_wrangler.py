#!/usr/bin/env python3
"""
SpecWrangler

This script reads a protocol entity model (enumerations, type aliases, interfaces,
requests and notifications) and generates the C++ headers a protocol client uses:
the type declarations, their JSON bindings, and the request and notification wrappers.

Usage:
    python spec_wrangler.py --input <model_file> --output <output_dir> [--artifact <name>] [--namespace <ns>] [--verbose]

Arguments:
    --input, -i     : Path to the entity model file (JSON)
    --output, -o    : Directory where the headers will be generated
    --artifact, -a  : Artifacts to generate (types, requests, notifications, or all)
                      Can provide several (e.g., --artifact types requests)
    --namespace, -n : C++ namespace of the generated code (default: Lsp)
    --verbose, -v   : Print debug information
    --help, -h      : Show this help message

Environment variables SW_INPUT_FILE, SW_OUTPUT_DIR, SW_ARTIFACTS, SW_NAMESPACE and
SW_VERBOSE override the corresponding arguments.

Example:
    python spec_wrangler.py --input lsp_model.json --output ./src/lsp
    python spec_wrangler.py --input lsp_model.json --output ./src/lsp --artifact types
"""

import argparse
import os
import sys
from typing import Dict, List, Optional

from dependency_sort import CyclicDependency
from generators.cpp_generator import DEFAULT_NAMESPACE, CppGeneratorBase
from generators.cpp_json_generator import CppJsonGenerator
from generators.cpp_messages_generator import CppNotificationsGenerator, CppRequestsGenerator
from generators.cpp_types_generator import CppTypesGenerator
from model_loader import ModelLoadError, load_model_file
from model_transforms.model_transform_pipeline import run_model_transform_pipeline
from spec_model import SpecModel

ARTIFACTS = ['types', 'requests', 'notifications']


class SpecFormatConverter:
    """
    Runs the cleanup pass over an entity model and writes every generated header.
    Each header is written independently: a failure in one does not stop the others.
    """

    def __init__(self, output_dir: str, model: Optional[SpecModel] = None, namespace: str = DEFAULT_NAMESPACE,
                 verbose: bool = False):
        """
        Initialize the converter.

        Args:
            output_dir: Directory where output files will be generated
            model: The entity model, or None to load it later with load_model()
            namespace: C++ namespace of the generated code
            verbose: Whether to print debug information (default: False)
        """
        self.output_dir = output_dir
        self.model = model
        self.options = {'namespace': namespace}
        self.verbose = verbose
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self._cleaned = False

    def debug_print(self, message: str) -> None:
        if self.verbose:
            print(f"[DEBUG] {message}")

    def log_error(self, error: str) -> None:
        self.errors.append(error)
        print(f"[ERROR] {error}", file=sys.stderr)

    def log_warning(self, warning: str) -> None:
        self.warnings.append(warning)
        if self.verbose:
            print(f"[WARNING] {warning}")

    def load_model(self, input_file: str) -> bool:
        """
        Load the entity model file.

        Returns:
            bool: True if loading was successful, False otherwise
        """
        try:
            self.model = load_model_file(input_file)
        except (OSError, ModelLoadError) as e:
            self.log_error(f"Cannot load model '{input_file}': {e}")
            return False
        self._cleaned = False
        self.debug_print(f"Loaded {len(self.model.enumerations)} enumerations, {len(self.model.types)} type aliases, "
                         f"{len(self.model.interfaces)} interfaces, {len(self.model.requests)} requests, "
                         f"{len(self.model.notifications)} notifications")
        return True

    def clean_model(self) -> None:
        """Run the cleanup pass once per model."""
        if self._cleaned:
            return
        self.model = run_model_transform_pipeline(self.model)
        self._cleaned = True
        self.debug_print(f"After cleanup: {len(self.model.enumerations)} enumerations, {len(self.model.types)} type "
                         f"aliases, {len(self.model.interfaces)} interfaces")

    def _write_header(self, generator: CppGeneratorBase) -> bool:
        try:
            headers: Dict[str, str] = generator.generate_header()
        except CyclicDependency as e:
            self.log_error(f"{generator.filename}: {e}")
            return False
        for filename, content in headers.items():
            path = os.path.join(self.output_dir, filename)
            try:
                with open(path, 'w', encoding='utf-8', newline='\n') as f:
                    f.write(content)
            except OSError as e:
                self.log_error(f"Cannot write '{path}': {e}")
                return False
            self.debug_print(f"Wrote {path}")
        return True

    def _check_model(self) -> bool:
        if self.model is None:
            self.log_error("No entity model available. Load a model first.")
            return False
        self.clean_model()
        return True

    def generate_types_output(self) -> bool:
        """
        Generate types.h and types_json.h.

        Returns:
            bool: True if generation was successful, False otherwise
        """
        if not self._check_model():
            return False
        success = self._write_header(CppTypesGenerator(self.model, self.options))
        # The bindings do not depend on the declaration order
        if not self._write_header(CppJsonGenerator(self.model, self.options)):
            success = False
        return success

    def generate_notifications_output(self) -> bool:
        if not self._check_model():
            return False
        return self._write_header(CppNotificationsGenerator(self.model, self.options))

    def generate_requests_output(self) -> bool:
        if not self._check_model():
            return False
        return self._write_header(CppRequestsGenerator(self.model, self.options))

    def generate(self, artifacts: Optional[List[str]] = None) -> bool:
        """Generate the requested artifacts (all by default); True if all succeeded."""
        artifacts = artifacts or ARTIFACTS
        success = True
        if 'types' in artifacts and not self.generate_types_output():
            success = False
        if 'notifications' in artifacts and not self.generate_notifications_output():
            success = False
        if 'requests' in artifacts and not self.generate_requests_output():
            success = False
        return success


def _split_artifacts(values: List[str]) -> List[str]:
    artifacts = []
    for value in values:
        artifacts.extend(v.strip().lower() for v in value.replace(',', ' ').split())
    return artifacts


def parse_arguments(argv: Optional[List[str]] = None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Generate C++ protocol headers from an entity model",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument('--input', '-i', help='Path to the entity model file (JSON)')
    parser.add_argument('--output', '-o', help='Directory where the headers will be generated')
    parser.add_argument('--artifact', '-a', nargs='+', default=['all'],
                        help='Artifacts to generate (types, requests, notifications, or all)')
    parser.add_argument('--namespace', '-n', default=DEFAULT_NAMESPACE, help='C++ namespace of the generated code')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output for debugging')

    args = parser.parse_args(argv)

    # Override with environment variables if set
    args.input = os.environ.get('SW_INPUT_FILE', args.input)
    args.output = os.environ.get('SW_OUTPUT_DIR', args.output)
    args.namespace = os.environ.get('SW_NAMESPACE', args.namespace)
    if 'SW_ARTIFACTS' in os.environ:
        args.artifact = [os.environ['SW_ARTIFACTS']]
    if os.environ.get('SW_VERBOSE', '').lower() in ('1', 'true', 'yes', 'on'):
        args.verbose = True

    if not args.input:
        parser.error("the following arguments are required: --input/-i")
    if not args.output:
        parser.error("the following arguments are required: --output/-o")

    artifacts = _split_artifacts(args.artifact)
    valid_choices = ARTIFACTS + ['all']
    for artifact in artifacts:
        if artifact not in valid_choices:
            parser.error(f"argument --artifact/-a: invalid choice: '{artifact}' (choose from {', '.join(valid_choices)})")
    args.artifact = ARTIFACTS if 'all' in artifacts else artifacts

    return args


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point of the script.
    """
    args = parse_arguments(argv)

    converter = SpecFormatConverter(args.output, namespace=args.namespace, verbose=args.verbose)
    if not converter.load_model(args.input):
        return 1

    try:
        os.makedirs(args.output, exist_ok=True)
    except OSError as e:
        converter.log_warning(f"Cannot create output directory '{args.output}': {e}")

    if converter.generate(args.artifact):
        print("Header generation completed successfully.")
        return 0
    print("Header generation completed with errors.")
    return 1


if __name__ == '__main__':
    sys.exit(main())
