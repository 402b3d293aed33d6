"""Actions package - Steps that change the host.

RuntimeAction may install a package; MaterializeAction writes the
project tree. Both ask before doing anything destructive.
"""

from apache_skeleton.actions.materialize import MaterializeAction
from apache_skeleton.actions.runtime import RuntimeAction

__all__ = ["MaterializeAction", "RuntimeAction"]
