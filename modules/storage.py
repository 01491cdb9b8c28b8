import os
from typing import Optional

from attr import dataclass, field
from pulumi import ComponentResource, FileAsset, Output, ResourceOptions, log
from pulumi_azure_native import cosmosdb, storage

INDEX_DOCUMENT = "index.html"
ERROR_404_DOCUMENT = "404.html"
SITE_FILE_NAMES = (INDEX_DOCUMENT, ERROR_404_DOCUMENT)
SITE_CONTENT_TYPE = "text/html"


@dataclass
class CosmosComponentArgs:
    name: str
    args: dict


@dataclass
class CosmosDBArgs:
    resource_group_name: Output[str]
    cosmos_account_args: CosmosComponentArgs
    cosmos_database_args: CosmosComponentArgs
    tags: dict = field(factory=dict)


@dataclass
class StorageComponentArgs:
    name: str
    args: dict


@dataclass
class SiteFile:
    name: str
    source: str
    content_type: str = SITE_CONTENT_TYPE

    def __attrs_post_init__(self):
        if not self.name:
            raise ValueError(
                f"site file sourced from '{self.source}' has no name"
            )


@dataclass
class StaticSiteArgs:
    resource_group_name: Output[str]
    storage_account_args: StorageComponentArgs
    static_website_name: str
    site_files: list[SiteFile]
    tags: dict = field(factory=dict)


class CosmosAccountDefaults:
    """
    Predefined Cosmos DB account properties. Merged into
    `CosmosDBArgs.cosmos_account_args.args` by the caller.
    """

    database_account_offer_type: cosmosdb.DatabaseAccountOfferType = (
        cosmosdb.DatabaseAccountOfferType.STANDARD
    )
    consistency_policy: cosmosdb.ConsistencyPolicyArgs = (
        cosmosdb.ConsistencyPolicyArgs(
            default_consistency_level=cosmosdb.DefaultConsistencyLevel.SESSION,
        )
    )


def static_site_files(source_dir: str) -> list[SiteFile]:
    """
    Returns the fixed set of files published to the static website, each
    read from `source_dir`.
    """
    return [
        SiteFile(name=name, source=os.path.join(source_dir, name))
        for name in SITE_FILE_NAMES
    ]


class CosmosNoSQL(ComponentResource):
    """
    Create a Cosmos DB account with a single SQL database.
    """

    def __init__(
        self,
        name: str,
        args: CosmosDBArgs,
        opts: Optional[ResourceOptions] = None,
    ):
        super().__init__("cosmoswebapp:storage:CosmosNoSQL", name, None, opts)

        self.opts = ResourceOptions.merge(opts, ResourceOptions(parent=self))

        self.cosmos_account = cosmosdb.DatabaseAccount(
            resource_name=args.cosmos_account_args.name,
            resource_group_name=args.resource_group_name,
            **args.cosmos_account_args.args,
            tags=args.tags or None,
            opts=self.opts,
        )

        self.cosmos_database = cosmosdb.SqlResourceSqlDatabase(
            resource_name=args.cosmos_database_args.name,
            **{
                **args.cosmos_database_args.args,
                "account_name": self.cosmos_account.name,
                "resource_group_name": args.resource_group_name,
            },
            opts=ResourceOptions(parent=self.cosmos_account),
        )
        log.debug(
            f"Declared Cosmos DB database '{args.cosmos_database_args.name}'",
            resource=self,
        )

        # Raw endpoint, not an authenticated connection string
        self.document_endpoint: Output[str] = (
            self.cosmos_account.document_endpoint
        )

        self.register_outputs({"document_endpoint": self.document_endpoint})


class StaticSiteStorage(ComponentResource):
    """
    Create a Storage Account serving a static website, and upload the
    site files into the generated web container.
    """

    def __init__(
        self,
        name: str,
        args: StaticSiteArgs,
        opts: Optional[ResourceOptions] = None,
    ):
        super().__init__(
            "cosmoswebapp:storage:StaticSiteStorage", name, None, opts
        )

        self.opts = ResourceOptions.merge(opts, ResourceOptions(parent=self))
        self.site_blobs: dict[str, storage.Blob] = {}

        self.storage_account = storage.StorageAccount(
            resource_name=args.storage_account_args.name,
            **{
                **args.storage_account_args.args,
                "resource_group_name": args.resource_group_name,
            },
            tags=args.tags or None,
            opts=self.opts,
        )

        self.static_website = storage.StorageAccountStaticWebsite(
            resource_name=args.static_website_name,
            account_name=self.storage_account.name,
            resource_group_name=args.resource_group_name,
            index_document=INDEX_DOCUMENT,
            error404_document=ERROR_404_DOCUMENT,
            opts=ResourceOptions(parent=self.storage_account),
        )

        for site_file in args.site_files:
            # container_name is only known once the static website exists
            self.site_blobs[site_file.name] = storage.Blob(
                resource_name=site_file.name,
                blob_name=site_file.name,
                account_name=self.storage_account.name,
                container_name=self.static_website.container_name,
                resource_group_name=args.resource_group_name,
                source=FileAsset(site_file.source),
                content_type=site_file.content_type,
                opts=ResourceOptions(parent=self.static_website),
            )
            log.debug(
                f"Declared upload of '{site_file.source}' as {site_file.content_type}",  # noqa: E501
                resource=self,
            )

        self.web_endpoint: Output[str] = (
            self.storage_account.primary_endpoints.web
        )

        self.register_outputs({"web_endpoint": self.web_endpoint})
