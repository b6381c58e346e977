"""Init scripts that wrap `_kn` into `cd`-ing shell functions.

The query binary only prints a path. The shell function is what changes
the directory, so these scripts are eval-ed by the user's rc file:

    eval "$(_kn init bash)"
"""

from enum import Enum

from kn_common.constants import ARG_EXCLUDE, CMD_INTERACTIVE, CMD_QUERY, INTERACTIVE_SHELL_FUNCTION_NAME, QUERY_BIN_NAME, SHELL_FUNCTION_NAME
from kn_core.errors import InvalidArgValueError


class Shell(Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POWERSHELL = "powershell"

    @classmethod
    def from_name(cls, name: str) -> "Shell":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidArgValueError("shell", name)


# bash and zsh understand the same function syntax
POSIX_TEMPLATE = """\
{func}() {{
    if [ "$#" -eq 0 ]; then
        builtin cd ~ || return
    elif [ "$#" -eq 1 ] && [ "$1" = "-" ]; then
        builtin cd - || return
    else
        local _kn_target
        _kn_target="$({query_command})" || return
        builtin cd "$_kn_target" || return
    fi
}}

{interactive_func}() {{
    local _kn_tmp _kn_target
    _kn_tmp="$(mktemp)" || return
    if {bin} {interactive} "$_kn_tmp"; then
        _kn_target="$(cat "$_kn_tmp")"
        [ -n "$_kn_target" ] && builtin cd "$_kn_target"
    fi
    rm -f "$_kn_tmp"
}}
"""

FISH_TEMPLATE = """\
function {func}
    if test (count $argv) -eq 0
        builtin cd ~
    else if test (count $argv) -eq 1; and test "$argv[1]" = "-"
        builtin cd -
    else
        set -l _kn_target ({query_command})
        and builtin cd "$_kn_target"
    end
end

function {interactive_func}
    set -l _kn_tmp (mktemp)
    if {bin} {interactive} $_kn_tmp
        set -l _kn_target (cat $_kn_tmp)
        test -n "$_kn_target"; and builtin cd "$_kn_target"
    end
    rm -f $_kn_tmp
end
"""

POWERSHELL_TEMPLATE = """\
function {func} {{
    if ($args.Count -eq 0) {{
        $global:KN_OLDPWD = (Get-Location).Path
        Set-Location ~
    }} elseif ($args.Count -eq 1 -and $args[0] -eq '-') {{
        Set-Location -
    }} else {{
        $_kn_target = {query_command}
        if ($LASTEXITCODE -eq 0 -and $_kn_target) {{
            $global:KN_OLDPWD = (Get-Location).Path
            Set-Location -LiteralPath $_kn_target
        }}
    }}
}}

function {interactive_func} {{
    $_kn_tmp = New-TemporaryFile
    {bin} {interactive} $_kn_tmp.FullName
    if ($LASTEXITCODE -eq 0) {{
        $_kn_target = Get-Content -Raw $_kn_tmp.FullName
        if ($_kn_target) {{
            $global:KN_OLDPWD = (Get-Location).Path
            Set-Location -LiteralPath $_kn_target.Trim()
        }}
    }}
    Remove-Item $_kn_tmp.FullName
}}
"""

_TEMPLATES = {
    Shell.BASH: POSIX_TEMPLATE,
    Shell.ZSH: POSIX_TEMPLATE,
    Shell.FISH: FISH_TEMPLATE,
    Shell.POWERSHELL: POWERSHELL_TEMPLATE,
}

_PREVIOUS_DIR = {
    Shell.BASH: '"${OLDPWD}"',
    Shell.ZSH: '"${OLDPWD}"',
    Shell.FISH: '"$dirprev[-1]"',
    Shell.POWERSHELL: '"$global:KN_OLDPWD"',
}

_ALL_ARGS = {
    Shell.BASH: '"$@"',
    Shell.ZSH: '"$@"',
    Shell.FISH: "$argv",
    Shell.POWERSHELL: "@args",
}


def get_query_command(shell: Shell, exclude_old_pwd: bool) -> str:
    parts = [QUERY_BIN_NAME, CMD_QUERY]
    if exclude_old_pwd:
        parts += [ARG_EXCLUDE, _PREVIOUS_DIR[shell]]
    parts += ["--", _ALL_ARGS[shell]]
    return " ".join(parts)


def get_init_script(shell: Shell, exclude_old_pwd: bool = False) -> str:
    return _TEMPLATES[shell].format(
        func=SHELL_FUNCTION_NAME,
        interactive_func=INTERACTIVE_SHELL_FUNCTION_NAME,
        bin=QUERY_BIN_NAME,
        interactive=CMD_INTERACTIVE,
        query_command=get_query_command(shell, exclude_old_pwd),
    )
