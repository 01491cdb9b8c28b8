from typing import Optional

from attr import dataclass, field
from pulumi import ComponentResource, Input, Output, ResourceOptions, log
from pulumi_azure_native import applicationinsights, web

APP_INSIGHTS_AGENT_VERSION = "~2"
DB_CONNECTION_STRING_NAME = "db"


@dataclass
class AppServicePlanSpecs:
    name: str
    kind: str
    sku_name: str
    sku_tier: str


@dataclass
class AppInsightsSpecs:
    name: str
    kind: str
    application_type: str


@dataclass
class WebAppArgs:
    resource_group_name: Output[str]
    web_app_name: str
    plan: AppServicePlanSpecs
    insights: AppInsightsSpecs
    db_connection_string: Input[str]
    tags: dict = field(factory=dict)


def instrumentation_app_settings(
    instrumentation_key: Input[str],
) -> list[web.NameValuePairArgs]:
    """
    Application Insights settings for a Web App. The instrumentation key is
    set raw and in connection-string form.
    """
    return [
        web.NameValuePairArgs(
            name="APPINSIGHTS_INSTRUMENTATIONKEY",
            value=instrumentation_key,
        ),
        web.NameValuePairArgs(
            name="APPLICATIONINSIGHTS_CONNECTION_STRING",
            value=Output.concat("InstrumentationKey=", instrumentation_key),
        ),
        web.NameValuePairArgs(
            name="ApplicationInsightsAgent_EXTENSION_VERSION",
            value=APP_INSIGHTS_AGENT_VERSION,
        ),
    ]


class CosmosWebApp(ComponentResource):
    """
    Create an App Service Plan, Application Insights and a Web App reading
    from Cosmos DB.
    """

    def __init__(
        self,
        name: str,
        args: WebAppArgs,
        opts: Optional[ResourceOptions] = None,
    ):
        super().__init__("cosmoswebapp:web:CosmosWebApp", name, None, opts)

        self.opts = ResourceOptions.merge(opts, ResourceOptions(parent=self))
        tags = args.tags or None

        self.app_service_plan = web.AppServicePlan(
            resource_name=args.plan.name,
            resource_group_name=args.resource_group_name,
            kind=args.plan.kind,
            sku=web.SkuDescriptionArgs(
                name=args.plan.sku_name,
                tier=args.plan.sku_tier,
            ),
            tags=tags,
            opts=self.opts,
        )

        self.app_insights = applicationinsights.Component(
            resource_name=args.insights.name,
            resource_group_name=args.resource_group_name,
            kind=args.insights.kind,
            application_type=args.insights.application_type,
            tags=tags,
            opts=self.opts,
        )

        self.web_app = web.WebApp(
            resource_name=args.web_app_name,
            resource_group_name=args.resource_group_name,
            server_farm_id=self.app_service_plan.id,
            site_config=web.SiteConfigArgs(
                app_settings=instrumentation_app_settings(
                    self.app_insights.instrumentation_key
                ),
                connection_strings=[
                    web.ConnStringInfoArgs(
                        name=DB_CONNECTION_STRING_NAME,
                        connection_string=args.db_connection_string,
                        type=web.ConnectionStringType.DOC_DB,
                    )
                ],
            ),
            tags=tags,
            opts=ResourceOptions(parent=self.app_service_plan),
        )
        log.debug(
            f"Declared Web App '{args.web_app_name}' on plan '{args.plan.name}'",  # noqa: E501
            resource=self,
        )

        self.default_host_name: Output[str] = self.web_app.default_host_name

        self.register_outputs({})
