"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pattern, outputSuffix,
                   raw, formatSafe
        - env_check: templateFiles, envOK
        - templates_compile: compiledFiles, compileResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory searched for template files
        outputdir: Directory receiving compiled files
        verbosity: Logging verbosity level (1-3)
        pattern: Glob selecting template files inside inputdir
        outputSuffix: Suffix given to compiled files
        raw: Treat templates as raw (no escape resolution)
        formatSafe: Keep literal braces doubled in the output
        envOK: Environment validation passed
        templateFiles: Template files found by env_check
        compiledFiles: Output files written by templates_compile
        compileResult: Summary (status, file_count, failures)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: str = field(default="*.sgr")
    outputSuffix: str = field(default=".ansi")
    raw: bool = field(default=False)
    formatSafe: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    templateFiles: List[Path] = field(default_factory=list)
    compiledFiles: List[Path] = field(default_factory=list)
    compileResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (pattern, raw, etc.)
            inputdir: Directory containing template files
            outputdir: Directory for compiled output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Namespace may carry options that are not state fields
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            templates_compile,
            results_report
        )

    This is equivalent to:
        results_report(templates_compile(env_check(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
