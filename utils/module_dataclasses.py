from dataclasses import dataclass


@dataclass(frozen=True)
class StackConfig:
    """
    Dataclass to hold the resolved stack configuration.

    Args:
        resource_group_name (str): Name of the Azure Resource Group.
        location (str): Azure region for the Resource Group and Cosmos DB.
        cosmos_account_name (str): Name of the Cosmos DB account.
        cosmos_db_name (str): Name (and id) of the Cosmos DB SQL database.
        storage_name (str): Name of the Storage Account.
        storage_kind (str): Kind of the Storage Account, e.g. `StorageV2`.
        storage_sku (str): SKU name of the Storage Account.
        app_service_name (str): Name of the App Service Plan.
        app_service_kind (str): Kind of the App Service Plan.
        app_service_sku_name (str): SKU name of the App Service Plan.
        app_service_sku_tier (str): SKU tier of the App Service Plan.
        app_insights_name (str): Name of the Application Insights component.
        app_insights_kind (str): Kind of the Application Insights component.
        app_insights_type (str): Application type of the Application
            Insights component.
        web_app_name (str): Name of the Web App.
        front_end_name (str): Name of the static website resource.
    """

    resource_group_name: str
    location: str
    cosmos_account_name: str
    cosmos_db_name: str
    storage_name: str
    storage_kind: str
    storage_sku: str
    app_service_name: str
    app_service_kind: str
    app_service_sku_name: str
    app_service_sku_tier: str
    app_insights_name: str
    app_insights_kind: str
    app_insights_type: str
    web_app_name: str
    front_end_name: str
