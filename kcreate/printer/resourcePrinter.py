"""
对象输出：json / yaml / name，默认输出 "<resource>/<name> created"
"""

import json
import sys

import yaml

from kcreate.cmd.cmdUtil import DryRunStrategy

OUTPUT_FORMATS = ("json", "yaml", "name")


class ResourcePrinter:
    def __init__(self, output=None, operation="created", dry_run=DryRunStrategy.NONE, out=None):
        if output and output not in OUTPUT_FORMATS:
            raise ValueError(
                f"unable to match a printer suitable for the output format {output!r}, "
                f"allowed formats are: {','.join(OUTPUT_FORMATS)}"
            )
        self.output = output
        self.operation = operation
        self.dry_run = dry_run
        self.out = out or sys.stdout

    def _operation_text(self):
        if self.dry_run == DryRunStrategy.CLIENT:
            return f"{self.operation} (dry run)"
        if self.dry_run == DryRunStrategy.SERVER:
            return f"{self.operation} (server dry run)"
        return self.operation

    def format(self, obj):
        """obj 为对象的字典形式"""
        if self.output == "json":
            return json.dumps(obj, indent=2) + "\n"
        if self.output == "yaml":
            return yaml.safe_dump(obj, sort_keys=False)

        kind = obj.get("kind", "").lower()
        name = obj.get("metadata", {}).get("name", "")
        if self.output == "name":
            return f"{kind}/{name}\n"
        return f"{kind}/{name} {self._operation_text()}\n"

    def print_obj(self, obj):
        self.out.write(self.format(obj))
