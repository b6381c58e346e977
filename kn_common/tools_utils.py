from typing import List

from kn_common.custom_structures import ToolTemplate


def format_template_command(template: ToolTemplate, program: str) -> str:
    arg_parts: List[str] = [template.command]
    for arg, value in template.args.items():
        if isinstance(value, list):
            # arg then multiple values
            arg_parts.append(" ".join([arg] + [str(v) for v in value]))
        elif isinstance(value, bool):
            # flags: include only when True
            if value:
                arg_parts.append(str(arg))
        else:
            arg_parts.append(f"{arg} {value}")
    arg_parts.extend(template.positionals)
    return f"{program} {' '.join(arg_parts)}".rstrip()


def build_examples_epilog(templates: List[ToolTemplate], program: str) -> str:
    """
    Build a help epilog string from a list of ToolTemplate entries.
        Each example line shows a runnable command for `program`.
    """
    if not templates:
        return ""

    lines: List[str] = ["Examples:"]
    for i, t in enumerate(templates, 1):
        lines.append("")
        lines.append(f"# Example {i}: {t.name}")
        if t.extra_description:
            lines.append(f"# {t.extra_description}")
        lines.append(format_template_command(t, program))

    return "\n".join(lines)
