"""
create persistentvolumeclaim 子命令
流程：complete（收集参数） -> validate（预检） -> run（构造、提交、输出）
"""

import logging

from kcreate.apiServer.apiClient import ApiClient
from kcreate.builder import pvcBuilder
from kcreate.cmd.cmdUtil import (
    DEFAULT_FIELD_MANAGER,
    DryRunStrategy,
    create_or_update_annotation,
    get_dry_run_strategy,
    get_validation_directive,
    name_from_command_args,
)
from kcreate.config.claimRequest import ClaimRequest
from kcreate.config.uriConfig import URIConfig, resolve_namespace
from kcreate.printer.resourcePrinter import ResourcePrinter
from kcreate.util.errors import ApiError
from kcreate.validation import pvcValidator

EXAMPLES = """examples:
  # Create a persistentvolumeclaim
  kcreate create persistentvolumeclaim my-pvc --storage-request=1Gi

  # Create a persistentvolumeclaim with a resource limit
  kcreate create persistentvolumeclaim my-pvc --storage-request=500Mi --storage-limit=1Gi

  # Create a persistentvolumeclaim with an access mode
  kcreate create persistentvolumeclaim my-pvc --storage-request=500Mi --access-modes=ReadWriteOnce
"""


class CreatePersistentVolumeClaimOptions:
    """create pvc 的命令行选项"""

    def __init__(self, out=None, client=None):
        self.out = out
        self.client = client
        self.logger = logging.getLogger(__name__)

        self.request = None
        self.namespace = "default"
        self.enforce_namespace = False
        self.dry_run_strategy = DryRunStrategy.NONE
        self.validation_directive = None
        self.field_manager = DEFAULT_FIELD_MANAGER
        self.create_annotation = False
        self.printer = None

    def complete(self, args):
        """从 argparse 结果补全所有选项"""
        name = name_from_command_args(args.name)
        self.namespace, self.enforce_namespace = resolve_namespace(args.namespace)
        self.request = ClaimRequest.from_args(name, args, namespace=self.namespace)

        self.dry_run_strategy = get_dry_run_strategy(args.dry_run)
        self.validation_directive = get_validation_directive(args.validate)
        self.field_manager = args.field_manager or DEFAULT_FIELD_MANAGER
        self.create_annotation = args.save_config

        self.printer = ResourcePrinter(
            output=args.output, dry_run=self.dry_run_strategy, out=self.out
        )
        if self.client is None and self.dry_run_strategy != DryRunStrategy.CLIENT:
            self.client = ApiClient(URIConfig(args.server))

        self.logger.debug(
            f"completed options for pvc {name}: namespace={self.namespace} "
            f"enforce={self.enforce_namespace} dry_run={self.dry_run_strategy.value}"
        )

    def validate(self):
        pvcValidator.validate(self.request)

    def create_persistent_volume_claim(self):
        return pvcBuilder.build(self.request, self.enforce_namespace)

    def _create_params(self):
        params = {"fieldValidation": self.validation_directive.value}
        if self.field_manager:
            params["fieldManager"] = self.field_manager
        if self.dry_run_strategy == DryRunStrategy.SERVER:
            params["dryRun"] = "All"
        return params

    def run(self):
        pvc = self.create_persistent_volume_claim()
        pvc = create_or_update_annotation(self.create_annotation, pvc)

        obj = pvc.to_dict()
        if self.dry_run_strategy != DryRunStrategy.CLIENT:
            self.logger.info(f"Creating PVC {self.namespace}/{pvc.name}")
            try:
                obj = self.client.create_pvc(self.namespace, obj, params=self._create_params())
            except ApiError as e:
                raise ApiError(
                    f"failed to create persistentVolumeClaim {e}",
                    status_code=e.status_code,
                    body=e.body,
                ) from e

        self.printer.print_obj(obj)
        return obj


def add_parser(subparsers):
    """注册 persistentvolumeclaim（别名 pvc）子命令"""
    parser = subparsers.add_parser(
        "persistentvolumeclaim",
        aliases=["pvc"],
        help="Create a persistentvolumeclaim with the specified name",
        description="Create a persistentvolumeclaim with the specified name.",
        epilog=EXAMPLES,
    )
    parser.add_argument("name", nargs="*", metavar="NAME", help="Name of the persistentvolumeclaim")
    parser.add_argument("--storage-request", default="", help="Storage request capacity for the pvc")
    parser.add_argument("--storage-limit", default="", help="Storage limit capacity for the pvc")
    parser.add_argument("--access-modes", default="", help="Access Modes applied to pvc")
    parser.add_argument("--storage-class-name", default="", help="Storage class name that pvc will use")
    parser.add_argument("-n", "--namespace", help="If present, the namespace scope for this request")
    parser.add_argument("--server", help="The address and port of the API server")
    parser.add_argument(
        "--dry-run",
        default="none",
        help='Must be "none", "server", or "client"',
    )
    parser.add_argument("-o", "--output", help="Output format. One of: json|yaml|name")
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Save the configuration of the current object in its annotation",
    )
    parser.add_argument(
        "--validate",
        default="strict",
        help="Must be one of: strict (or true), warn, ignore (or false)",
    )
    parser.add_argument(
        "--field-manager",
        default=DEFAULT_FIELD_MANAGER,
        help="Name of the manager used to track field ownership",
    )
    parser.set_defaults(handler=cmd_create_pvc)
    return parser


def cmd_create_pvc(args, out=None):
    o = CreatePersistentVolumeClaimOptions(out=out)
    o.complete(args)
    o.validate()
    return o.run()
