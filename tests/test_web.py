import pulumi

from azure_mocks import MOCKS, instrumentation_key
from modules.web import (
    AppInsightsSpecs,
    AppServicePlanSpecs,
    CosmosWebApp,
    WebAppArgs,
)

DB_ENDPOINT = "https://unitcosmosacct.documents.azure.com:443/"


def declare_web_app() -> CosmosWebApp:
    return CosmosWebApp(
        name="unit-app",
        args=WebAppArgs(
            resource_group_name=pulumi.Output.from_input("unit-rg"),
            web_app_name="unit-webapp",
            plan=AppServicePlanSpecs(
                name="unit-plan", kind="App", sku_name="B1", sku_tier="Basic"
            ),
            insights=AppInsightsSpecs(
                name="unit-insights", kind="web", application_type="web"
            ),
            db_connection_string=pulumi.Output.from_input(DB_ENDPOINT),
        ),
    )


@pulumi.runtime.test
def test_plan_and_insights_use_their_specs():
    MOCKS.reset()
    app = declare_web_app()

    def check(_):
        plan = MOCKS.resources["unit-plan"].inputs
        assert plan["resourceGroupName"] == "unit-rg"
        assert plan["kind"] == "App"
        assert plan["sku"] == {"name": "B1", "tier": "Basic"}

        insights = MOCKS.resources["unit-insights"].inputs
        assert insights["resourceGroupName"] == "unit-rg"
        assert insights["kind"] == "web"
        assert insights["applicationType"] == "web"

    return pulumi.Output.all(
        app.app_service_plan.urn, app.app_insights.urn
    ).apply(check)


@pulumi.runtime.test
def test_web_app_runs_on_the_plan():
    MOCKS.reset()
    app = declare_web_app()

    def check(args):
        host_name = args[0]
        assert host_name == "unit-webapp.azurewebsites.net"
        web_app = MOCKS.resources["unit-webapp"].inputs
        assert web_app["serverFarmId"] == "unit-plan_id"
        assert web_app["resourceGroupName"] == "unit-rg"

    return pulumi.Output.all(app.default_host_name, app.web_app.urn).apply(
        check
    )


@pulumi.runtime.test
def test_connection_string_is_the_document_endpoint():
    MOCKS.reset()
    app = declare_web_app()

    def check(_):
        site_config = MOCKS.resources["unit-webapp"].inputs["siteConfig"]
        assert site_config["connectionStrings"] == [
            {"name": "db", "connectionString": DB_ENDPOINT, "type": "DocDb"}
        ]

    return app.web_app.urn.apply(check)


@pulumi.runtime.test
def test_instrumentation_key_is_set_twice():
    MOCKS.reset()
    app = declare_web_app()

    def check(_):
        key = instrumentation_key("unit-insights")
        settings = {
            s["name"]: s["value"]
            for s in MOCKS.resources["unit-webapp"].inputs["siteConfig"][
                "appSettings"
            ]
        }
        assert settings == {
            "APPINSIGHTS_INSTRUMENTATIONKEY": key,
            "APPLICATIONINSIGHTS_CONNECTION_STRING": f"InstrumentationKey={key}",
            "ApplicationInsightsAgent_EXTENSION_VERSION": "~2",
        }
        assert sum(key in value for value in settings.values()) == 2

    return app.web_app.urn.apply(check)
