from pulumi import Config

from utils.module_dataclasses import StackConfig

# Maps each required config key to its `StackConfig` field
REQUIRED_CONFIG_KEYS: dict[str, str] = {
    "resourceGroupName": "resource_group_name",
    "location": "location",
    "cosmosAccountName": "cosmos_account_name",
    "cosmosDBName": "cosmos_db_name",
    "storageName": "storage_name",
    "storageKind": "storage_kind",
    "storageSKU": "storage_sku",
    "appServiceName": "app_service_name",
    "appServiceKind": "app_service_kind",
    "appServiceSKUName": "app_service_sku_name",
    "appServiceSKUTier": "app_service_sku_tier",
    "appInsightsName": "app_insights_name",
    "appInsightsKind": "app_insights_kind",
    "appInsightsType": "app_insights_type",
    "webAppName": "web_app_name",
    "frontEndName": "front_end_name",
}


def load_stack_config(config: Config) -> StackConfig:
    """
    Loads and returns every required stack setting from `config`.
    Raises `pulumi.ConfigMissingError` on the first key that is not set.
    """

    return StackConfig(
        **{
            field_name: config.require(key)
            for key, field_name in REQUIRED_CONFIG_KEYS.items()
        }
    )


def get_defaults(defaults_class: type) -> dict:
    """
    Returns the public, non-callable class attributes of `defaults_class`
    as resource keyword arguments.
    """
    return {
        k: v
        for k, v in vars(defaults_class).items()
        if not k.startswith("__") and not callable(v)
    }
