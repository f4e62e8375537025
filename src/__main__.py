#!/usr/bin/env python3
"""
sgrtemplate - Styled-string template compiler

Compiles template files containing brace-delimited style directives into
text files with literal SGR escape sequences. Formatting placeholders are
left in place for a later str.format() step.

Template syntax:
    {+Bold}  {-Bold}            add / remove a style
    {#RedFg} {#b[1f]}           named, indexed or truecolor colors
    {#f(170,187,204)}
    {+Bold&name-Dim}            chain directives, & keeps a placeholder
    {name} {}                   plain placeholders, untouched
    {{ }}                       literal braces
    \\n \\x41 \\u{1F600}          escapes (disabled with --raw)

Usage:
    sgrtemplate inputdir/ outputdir/ [--pattern '*.sgr'] [--outputSuffix .ansi]

Examples:
    # Compile every *.sgr file in templates/
    sgrtemplate templates/ out/

    # Keep {{ }} doubled so the output can be fed to str.format()
    sgrtemplate templates/ out/ --formatSafe

    # Show highlighted template source while compiling
    sgrtemplate templates/ out/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Compiler, TemplateError, __version__, LOG, state_connectToLogger
from .lib.lexer import source_highlight
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                 _                       _       _
  ___  __ _ _ __| |_ ___ _ __ ___  _ __ | | __ _| |_ ___
 / __|/ _` | '__| __/ _ \ '_ ` _ \| '_ \| |/ _` | __/ _ \
 \__ \ (_| | |  | ||  __/ | | | | | |_) | | (_| | ||  __/
 |___/\__, |_|   \__\___|_| |_| |_| .__/|_|\__,_|\__\___|
      |___/                       |_|

  Styled-string template compiler
"""

# Define CLI arguments
parser = ArgumentParser(
    description="sgrtemplate - compile style directives into SGR escape sequences",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern",
    default=appsettings.input_pattern,
    type=str,
    help="Glob (relative to inputdir) selecting template files",
)

parser.add_argument(
    "--outputSuffix",
    default=appsettings.output_suffix,
    type=str,
    help="Suffix given to compiled files",
)

parser.add_argument(
    "--raw",
    default=appsettings.raw_templates,
    action="store_true",
    help="Treat templates as raw: backslash escapes are kept literally",
)

parser.add_argument(
    "--formatSafe",
    default=appsettings.format_safe,
    action="store_true",
    help="Keep literal braces doubled so output is a valid str.format() template",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=appsettings.verbosity_default,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and collect template files.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - templateFiles: Sorted template files matching the pattern
            - envOK: True if environment is valid

    Exits:
        1 if inputdir is missing or no template matches
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.templateFiles = sorted(p for p in state.inputdir.glob(state.pattern) if p.is_file())
    if not state.templateFiles:
        print(
            f"Error: No templates matching '{state.pattern}' in {state.inputdir}",
            file=sys.stderr,
        )
        state.envOK = False
        sys.exit(1)

    LOG(f"Found {len(state.templateFiles)} template(s)", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def templates_compile(inputstate: ProgramState) -> ProgramState:
    """
    Compile every template file and write the results.

    Each file is compiled as one template; a file that fails to compile
    produces no output file.

    Args:
        inputstate: Program state with templateFiles set

    Returns:
        ProgramState with added fields:
            - compiledFiles: Output files written
            - compileResult: Dict containing:
                - status: bool (every template compiled)
                - file_count: int (templates compiled)
                - failures: list of "file: message" strings

    Exits:
        1 if env_check did not pass
    """

    state = inputstate.copy()

    if not state.envOK:
        print("Error: Environment not checked", file=sys.stderr)
        sys.exit(1)

    LOG("Compiling templates...", level=1)

    failures = []
    compiled_files = []
    for template in state.templateFiles:
        relative = template.relative_to(state.inputdir)
        source = template.read_text(encoding="utf-8")
        LOG(f"{relative}:\n{source_highlight(source)}", level=3)

        try:
            output = Compiler(source, raw=state.raw, format_safe=state.formatSafe).compile()
        except TemplateError as e:
            print(f"{relative}: {e}", file=sys.stderr)
            failures.append(f"{relative}: {e.message}")
            continue

        output_file = state.outputdir / relative.parent / appsettings.outputName_make(
            relative, state.outputSuffix
        )
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(output, encoding="utf-8")
        compiled_files.append(output_file)
        LOG(f"Wrote {output_file}", level=2)

    state.compiledFiles = compiled_files
    state.compileResult = {
        "status": not failures,
        "file_count": len(compiled_files),
        "failures": failures,
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display compilation results to user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if any template failed to compile
    """
    state: ProgramState = inputstate.copy()
    if not state.compileResult:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    LOG(f"Compiled {state.compileResult['file_count']} template(s)", level=1)
    for compiled in state.compiledFiles:
        LOG(f"  {compiled}", level=1)

    if not state.compileResult["status"]:
        print(
            f"Error: {len(state.compileResult['failures'])} template(s) failed to compile",
            file=sys.stderr,
        )
        sys.exit(1)
    return state


@chris_plugin(
    parser=parser,
    title="sgrtemplate - Styled-string template compiler",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - compile template files from inputdir into outputdir.

    Orchestrates the pipeline:
        1. env_check: Validate paths and collect templates
        2. templates_compile: Compile and write each template
        3. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - pattern: str - Template glob
            - outputSuffix: str - Output file suffix
            - raw: bool - Skip escape resolution
            - formatSafe: bool - Keep literal braces doubled
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing template files
        outputdir: Directory where compiled files will be written
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, templates_compile, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
