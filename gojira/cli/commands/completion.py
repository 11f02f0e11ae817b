"""install-completion: print the argcomplete hook for the user's shell."""

import os
import sys

from gojira.output import bold, dim

HOOK = 'eval "$(register-python-argcomplete gojira)"'
POWERSHELL_HOOK = "register-python-argcomplete --shell powershell gojira | Out-String | Invoke-Expression"


def run_install_completion() -> int:
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_name = '~/.zshrc' if 'zsh' in shell else '~/.bashrc'
        print(f"Add this line to {dim(os.path.expanduser(rc_name))}:\n")
        print(f"  {HOOK}\n")
        print(f"Then run: {dim('source ' + rc_name)}")
    elif 'fish' in shell:
        print("Run:\n")
        print("  register-python-argcomplete --shell fish gojira | source")
    elif sys.platform == 'win32':
        print("For PowerShell, add this to your $PROFILE:\n")
        print(f"  {POWERSHELL_HOOK}")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {HOOK}\n")
        print(f"  {dim('# PowerShell')}")
        print(f"  {POWERSHELL_HOOK}")

    print(f"\n{dim('After setup, press TAB to complete commands and flags.')}")
    return 0
