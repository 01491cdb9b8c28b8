# __main__.py
"""
Pulumi program to create a Cosmos DB backed Azure Web App with a static
website front end
"""

import modulepath_fixer  # noqa: F401

import os

from configs import stack_config
from pulumi import export, log, ResourceOptions
from pulumi_azure_native import cosmosdb, resources, storage

from modules.storage import (
    CosmosAccountDefaults,
    CosmosComponentArgs,
    CosmosDBArgs,
    CosmosNoSQL,
    StaticSiteArgs,
    StaticSiteStorage,
    StorageComponentArgs,
    static_site_files,
)
from modules.web import (
    AppInsightsSpecs,
    AppServicePlanSpecs,
    CosmosWebApp,
    WebAppArgs,
)
from utils.utils import get_defaults

DEBUG = os.getenv("DEBUG")
site_source_dir = os.path.join(os.path.dirname(__file__), "websrc")

if DEBUG:
    log.info(
        f"Declaring resource group '{stack_config.resource_group_name}' "
        f"in {stack_config.location}"
    )

### Setup Resource Group
resource_group = resources.ResourceGroup(
    stack_config.resource_group_name,
    location=stack_config.location,
    resource_group_name=stack_config.resource_group_name,
)
default_opts = ResourceOptions(parent=resource_group)

### Cosmos DB
cosmos_nosql = CosmosNoSQL(
    name=f"{stack_config.cosmos_account_name}-cosmos",
    args=CosmosDBArgs(
        resource_group_name=resource_group.name,
        cosmos_account_args=CosmosComponentArgs(
            name=stack_config.cosmos_account_name,
            args={
                **get_defaults(CosmosAccountDefaults),
                "locations": [
                    cosmosdb.LocationArgs(
                        location_name=stack_config.location,
                        failover_priority=0,
                    )
                ],
            },
        ),
        cosmos_database_args=CosmosComponentArgs(
            name=stack_config.cosmos_db_name,
            args={
                "resource": cosmosdb.SqlDatabaseResourceArgs(
                    id=stack_config.cosmos_db_name,
                ),
            },
        ),
    ),
    opts=default_opts,
)

### Setup Storage with static website
static_site = StaticSiteStorage(
    name=f"{stack_config.storage_name}-site",
    args=StaticSiteArgs(
        resource_group_name=resource_group.name,
        storage_account_args=StorageComponentArgs(
            name=stack_config.storage_name,
            args={
                "kind": stack_config.storage_kind,
                "sku": storage.SkuArgs(name=stack_config.storage_sku),
            },
        ),
        static_website_name=stack_config.front_end_name,
        site_files=static_site_files(site_source_dir),
    ),
    opts=default_opts,
)

### Web App
web_app = CosmosWebApp(
    name=f"{stack_config.web_app_name}-app",
    args=WebAppArgs(
        resource_group_name=resource_group.name,
        web_app_name=stack_config.web_app_name,
        plan=AppServicePlanSpecs(
            name=stack_config.app_service_name,
            kind=stack_config.app_service_kind,
            sku_name=stack_config.app_service_sku_name,
            sku_tier=stack_config.app_service_sku_tier,
        ),
        insights=AppInsightsSpecs(
            name=stack_config.app_insights_name,
            kind=stack_config.app_insights_kind,
            application_type=stack_config.app_insights_type,
        ),
        db_connection_string=cosmos_nosql.document_endpoint,
    ),
    opts=default_opts,
)

static_endpoint = static_site.web_endpoint
static_endpoint.apply(lambda url: log.info(f"Static website URL: {url}"))

export("staticEndpoint", static_endpoint)
