"""
module askterm.__main__

Default entrypoint when askterm is invoked on the console by a user.
Calls the main() function in askterm.entrypoint
"""

import sys

from .entrypoint import main

sys.exit(main())
