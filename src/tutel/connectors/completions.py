# src/tutel/connectors/completions.py

"""
Shell completion.

Static scripts for bash/zsh/fish. Task indices are completed dynamically:
the scripts call the hidden `tutel __complete-indices -- WORDS...`
subcommand, which prints `index<TAB>description` lines.
"""

from __future__ import annotations

from enum import StrEnum

from ..errors import UnsupportedShell


class Shell(StrEnum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


_BASH = r"""# bash completion for tutel
_tutel() {
    local cur="${COMP_WORDS[COMP_CWORD]}"
    local cmd="${COMP_WORDS[1]}"
    local opts=""

    if [[ $COMP_CWORD -eq 1 ]]; then
        COMPREPLY=( $(compgen -W "new add a done d rm edit e completions --help --version" -- "$cur") )
        return
    fi

    case "$cmd" in
        new) opts="-f --force" ;;
        add|a) opts="-c --completed" ;;
        done|d) opts="-a --all -n --not" ;;
        rm) opts="-a --all -c --cleanup --project" ;;
        edit|e) opts="-e --editor" ;;
        completions)
            COMPREPLY=( $(compgen -W "bash zsh fish" -- "$cur") )
            return
            ;;
    esac

    if [[ "$cur" == -* ]]; then
        COMPREPLY=( $(compgen -W "$opts --help" -- "$cur") )
        return
    fi

    case "$cmd" in
        done|d|rm|edit|e)
            local IFS=$'\n'
            COMPREPLY=( $(tutel __complete-indices -- "${COMP_WORDS[@]:2:COMP_CWORD-1}" 2>/dev/null | cut -f1) )
            ;;
    esac
}
complete -F _tutel tutel
"""

_ZSH = r"""#compdef tutel

_tutel_indices() {
    local -a candidates
    candidates=(${(f)"$(tutel __complete-indices -- "${(@)words[3,CURRENT]}" 2>/dev/null)"})
    candidates=(${${candidates//:/\\:}//$'\t'/:})
    _describe 'task index' candidates
}

_tutel() {
    local -a subcommands
    subcommands=(
        'new:create a new project'
        'add:add a new task'
        'a:add a new task'
        'done:mark a task as being completed'
        'd:mark a task as being completed'
        'rm:remove a task'
        'edit:edit an existing task'
        'e:edit an existing task'
        'completions:print shell completions'
    )

    if (( CURRENT == 2 )); then
        _describe 'command' subcommands
        return
    fi

    if [[ ${words[CURRENT]} == -* ]]; then
        case ${words[2]} in
            new) compadd -- -f --force --help ;;
            add|a) compadd -- -c --completed --help ;;
            done|d) compadd -- -a --all -n --not --help ;;
            rm) compadd -- -a --all -c --cleanup --project --help ;;
            edit|e) compadd -- -e --editor --help ;;
        esac
        return
    fi

    case ${words[2]} in
        done|d|rm|edit|e) _tutel_indices ;;
        completions) compadd bash zsh fish ;;
    esac
}

_tutel "$@"
"""

_FISH = r"""# fish completion for tutel
function __tutel_indices
    set -l tokens (commandline -opc)
    set -l current (commandline -ct)
    tutel __complete-indices -- $tokens[3..-1] "$current" 2>/dev/null
end

complete -c tutel -f
complete -c tutel -n __fish_use_subcommand -a new -d 'create a new project'
complete -c tutel -n __fish_use_subcommand -a 'add a' -d 'add a new task'
complete -c tutel -n __fish_use_subcommand -a 'done d' -d 'mark a task as being completed'
complete -c tutel -n __fish_use_subcommand -a rm -d 'remove a task'
complete -c tutel -n __fish_use_subcommand -a 'edit e' -d 'edit an existing task'
complete -c tutel -n __fish_use_subcommand -a completions -d 'print shell completions'

complete -c tutel -n '__fish_seen_subcommand_from new' -s f -l force -d 'force project creation'
complete -c tutel -n '__fish_seen_subcommand_from add a' -s c -l completed -d 'mark the task as already completed'
complete -c tutel -n '__fish_seen_subcommand_from done d' -s a -l all -d 'select all tasks'
complete -c tutel -n '__fish_seen_subcommand_from done d' -s n -l not -d 'mark the task as not being done'
complete -c tutel -n '__fish_seen_subcommand_from rm' -s a -l all -d 'remove all tasks'
complete -c tutel -n '__fish_seen_subcommand_from rm' -s c -l cleanup -d 'remove all completed tasks'
complete -c tutel -n '__fish_seen_subcommand_from rm' -l project -d 'remove the whole project file'
complete -c tutel -n '__fish_seen_subcommand_from edit e' -s e -l editor -r -d 'the editor to use'
complete -c tutel -n '__fish_seen_subcommand_from done d rm edit e' -a '(__tutel_indices)'
complete -c tutel -n '__fish_seen_subcommand_from completions' -a 'bash zsh fish'
"""

_SCRIPTS: dict[Shell, str] = {
    Shell.BASH: _BASH,
    Shell.ZSH: _ZSH,
    Shell.FISH: _FISH,
}


class CompletionScripts:
    def script_for(self, shell: str) -> str:
        try:
            key = Shell(shell.lower())
        except ValueError:
            raise UnsupportedShell(shell, tuple(s.value for s in Shell)) from None
        return _SCRIPTS[key]
