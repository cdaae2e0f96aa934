# Super Admin Resources
from .admin.subscription_plan_resource import blp_subscription_plan
from .admin.system_config_resource import blp_system_config
