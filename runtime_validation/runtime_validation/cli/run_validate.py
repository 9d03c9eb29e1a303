#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for validating YAML/JSON documents against a schema."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from ..config import ValidatorConfig
from ..exceptions import DocumentLoadError
from ..file_io.document_loader import DocumentLoader
from ..report.formatter import format_errors_github
from ..report.report import ValidationReport
from ..schema.meta_schema import check_schema_document
from ..schema.normalizer import normalize
from ..validator.engine import validate

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='runtime-validation',
        description='Validate YAML/JSON data documents against a runtime_validation schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--schema',
        required=True,
        help='Schema document (YAML or JSON)',
    )
    parser.add_argument(
        'paths',
        nargs='+',
        help='Data documents to validate',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--permissive',
        action='store_true',
        help='Allow unknown keys in implicit object schemas',
    )
    parser.add_argument(
        '--check-schema',
        action='store_true',
        help='Check the schema document against the bundled meta-schema first',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level (default: RUNTIME_VALIDATION_LOG_LEVEL or WARNING)',
    )
    return parser


def validate_files(paths: List[Path], schema, config: ValidatorConfig, loader: DocumentLoader) -> List[ValidationReport]:
    """Validate each data document against an already normalized schema."""
    reports = []
    for path in paths:
        report = ValidationReport(path)
        try:
            data, source_map = loader.load_with_source(path)
        except DocumentLoadError as e:
            report.set_load_error(str(e))
            reports.append(report)
            continue

        report.source_map = source_map
        report.add_errors(validate(data, schema, config=config))
        logger.info("%s: %d error(s)", path, len(report.errors))
        for error in report.errors:
            logger.debug(report.describe(error))
        reports.append(report)
    return reports


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the validation CLI."""
    args = build_parser().parse_args(argv)

    config = ValidatorConfig.from_env()
    if args.permissive:
        config = config.with_strict(False)
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    config.set_logging()

    loader = DocumentLoader()
    try:
        schema_document = loader.load(args.schema)
    except DocumentLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_LOAD_ERROR)

    if args.check_schema:
        issues = check_schema_document(schema_document)
        for issue in issues:
            where = f" (path={issue.path})" if issue.path else ""
            print(f"{args.schema}: {issue.severity.upper()}: {issue.message}{where}", file=sys.stderr)
        if any(issue.severity == 'error' for issue in issues):
            sys.exit(EXIT_LOAD_ERROR)

    # Normalized once and shared by every document
    schema = normalize(schema_document, config)
    reports = validate_files([Path(p) for p in args.paths], schema, config, loader)

    if args.format == 'json':
        output = {
            'files': len(reports),
            'errors': sum(len(r.errors) for r in reports),
            'results': [r.to_dict() for r in reports],
        }
        print(json.dumps(output, indent=2))
    elif args.format == 'github-actions':
        for report in reports:
            if report.load_error is not None:
                print(f"::error file={report.file_path},line=1::{report.load_error}")
            elif report.errors:
                print(format_errors_github(report.errors, str(report.file_path), report.source_map))
    else:  # human-readable
        for report in reports:
            if not report.ok:
                print(f"\n{report.format_human()}")

    if any(r.load_error is not None for r in reports):
        sys.exit(EXIT_LOAD_ERROR)
    if any(r.errors for r in reports):
        sys.exit(EXIT_INVALID)
    if args.format == 'human':
        print("Validation succeeded with no errors.")
    sys.exit(EXIT_OK)


if __name__ == '__main__':
    main()
