# console/constants/feature_catalog.py
#
# Default platform feature catalog, written to `platformFeatures` by
# `flask seed-platform-features`. `enabledGlobally` is the initial value of
# the feature's flag in the system config.

DEFAULT_PLATFORM_FEATURES = [
    # CORE BUSINESS
    {
        "featureId": "invoice_creation",
        "name": "Invoice Creation",
        "description": "Create and manage invoices with multiple items",
        "category": "core_business",
        "tier": "free",
        "configKey": "invoiceCreation",
        "planKey": "invoicesPerMonth",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "per month",
        "defaultLimit": 10,
        "enabledGlobally": True,
    },
    {
        "featureId": "customer_management",
        "name": "Customer Management",
        "description": "Add and manage customer contacts with detailed profiles",
        "category": "core_business",
        "tier": "free",
        "configKey": "customerManagement",
        "planKey": "customersLimit",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "total customers",
        "defaultLimit": 50,
        "enabledGlobally": True,
    },
    {
        "featureId": "product_management",
        "name": "Product Management",
        "description": "Manage product catalog with inventory tracking",
        "category": "core_business",
        "tier": "free",
        "configKey": "productManagement",
        "planKey": "productsLimit",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "total products",
        "defaultLimit": 100,
        "enabledGlobally": True,
    },
    {
        "featureId": "payment_recording",
        "name": "Payment Recording",
        "description": "Record and track customer payments",
        "category": "core_business",
        "tier": "free",
        "configKey": "paymentRecording",
        "planKey": "paymentsPerMonth",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "per month",
        "defaultLimit": 50,
        "enabledGlobally": True,
    },
    {
        "featureId": "basic_dashboard",
        "name": "Basic Dashboard",
        "description": "View key business metrics and statistics",
        "category": "core_business",
        "tier": "free",
        "configKey": "basicDashboard",
        "hasUsageLimit": False,
        "enabledGlobally": True,
    },

    # COMMUNICATION
    {
        "featureId": "whatsapp_business_integration",
        "name": "WhatsApp Business Integration",
        "description": "Connect a WhatsApp Business account",
        "category": "communication",
        "tier": "starter",
        "configKey": "whatsappBusinessIntegration",
        "hasUsageLimit": False,
        "enabledGlobally": True,
    },
    {
        "featureId": "whatsapp_messaging",
        "name": "WhatsApp Messages",
        "description": "Send WhatsApp messages to customers",
        "category": "communication",
        "tier": "starter",
        "configKey": "whatsappMessaging",
        "planKey": "whatsappMessagesPerMonth",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "per month",
        "defaultLimit": 100,
        "dependsOn": ["whatsapp_business_integration"],
        "enabledGlobally": True,
    },
    {
        "featureId": "email_notifications",
        "name": "Email Notifications",
        "description": "Send invoices and notifications via email",
        "category": "communication",
        "tier": "free",
        "configKey": "emailNotifications",
        "planKey": "emailsPerMonth",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "per month",
        "defaultLimit": 200,
        "enabledGlobally": True,
    },
    {
        "featureId": "sms_notifications",
        "name": "SMS Notifications",
        "description": "Send SMS notifications to customers",
        "category": "communication",
        "tier": "professional",
        "configKey": "smsNotifications",
        "planKey": "smsPerMonth",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "per month",
        "defaultLimit": 50,
        "enabledGlobally": False,
    },

    # ADVANCED
    {
        "featureId": "ai_product_recognition",
        "name": "AI Product Recognition",
        "description": "Product image recognition, naming, description and categorization",
        "category": "advanced",
        "tier": "professional",
        "configKey": "aiProductRecognition",
        "planKey": "aiFeatures",
        "planType": "boolean",
        "hasUsageLimit": True,
        "usageLimitUnit": "per month",
        "defaultLimit": 100,
        "enabledGlobally": False,
    },
    {
        "featureId": "advanced_reporting",
        "name": "Advanced Reporting",
        "description": "Generate detailed reports in PDF, CSV, and Excel formats",
        "category": "advanced",
        "tier": "professional",
        "configKey": "advancedReporting",
        "planKey": "advancedReporting",
        "planType": "boolean",
        "hasUsageLimit": True,
        "usageLimitUnit": "per month",
        "defaultLimit": 20,
        "enabledGlobally": True,
    },
    {
        "featureId": "advanced_analytics",
        "name": "Advanced Analytics",
        "description": "Detailed analytics with charts and insights",
        "category": "advanced",
        "tier": "professional",
        "configKey": "advancedAnalytics",
        "planKey": "advancedAnalytics",
        "planType": "boolean",
        "hasUsageLimit": False,
        "enabledGlobally": True,
    },

    # INTEGRATION
    {
        "featureId": "api_access",
        "name": "API Access",
        "description": "REST API for integrations and automation",
        "category": "integration",
        "tier": "professional",
        "configKey": "apiAccess",
        "planKey": "apiAccess",
        "planType": "boolean",
        "hasUsageLimit": True,
        "usageLimitUnit": "per hour",
        "defaultLimit": 100,
        "enabledGlobally": True,
    },
    {
        "featureId": "webhooks",
        "name": "Webhooks",
        "description": "Real-time event notifications via webhooks",
        "category": "integration",
        "tier": "enterprise",
        "configKey": "webhooks",
        "planKey": "webhooks",
        "planType": "boolean",
        "hasUsageLimit": True,
        "usageLimitUnit": "endpoints",
        "defaultLimit": 5,
        "enabledGlobally": False,
    },

    # COLLABORATION
    {
        "featureId": "team_members",
        "name": "Team Members",
        "description": "Add team members to collaborate",
        "category": "collaboration",
        "tier": "starter",
        "configKey": "teamMembers",
        "planKey": "teamMembers",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "total team members",
        "defaultLimit": 1,
        "enabledGlobally": True,
    },
    {
        "featureId": "role_based_access",
        "name": "Role-Based Access Control",
        "description": "Granular permissions for team members",
        "category": "collaboration",
        "tier": "professional",
        "configKey": "roleBasedAccess",
        "planKey": "roleBasedAccess",
        "planType": "boolean",
        "hasUsageLimit": False,
        "dependsOn": ["team_members"],
        "enabledGlobally": True,
    },

    # CUSTOMIZATION
    {
        "featureId": "custom_branding",
        "name": "Custom Branding",
        "description": "White-label with custom logo, colors, and branding",
        "category": "customization",
        "tier": "enterprise",
        "configKey": "customBranding",
        "planKey": "customBranding",
        "planType": "boolean",
        "hasUsageLimit": False,
        "enabledGlobally": False,
    },
    {
        "featureId": "multi_currency",
        "name": "Multi-Currency Support",
        "description": "Support for multiple currencies",
        "category": "customization",
        "tier": "professional",
        "configKey": "multiCurrency",
        "planKey": "multiCurrency",
        "planType": "boolean",
        "hasUsageLimit": False,
        "enabledGlobally": True,
    },
    {
        "featureId": "dark_mode",
        "name": "Dark Mode",
        "description": "Dark theme for mobile app",
        "category": "customization",
        "tier": "free",
        "configKey": "darkMode",
        "hasUsageLimit": False,
        "enabledGlobally": True,
    },
    {
        "featureId": "custom_domains",
        "name": "Custom Domains",
        "description": "Use custom domain for branded experience",
        "category": "customization",
        "tier": "enterprise",
        "configKey": "customDomains",
        "planKey": "customDomains",
        "planType": "number",
        "hasUsageLimit": True,
        "usageLimitUnit": "domains",
        "defaultLimit": 1,
        "enabledGlobally": False,
    },

    # SUPPORT
    {
        "featureId": "priority_support",
        "name": "Priority Support",
        "description": "Dedicated priority support channel",
        "category": "support",
        "tier": "professional",
        "configKey": "prioritySupport",
        "planKey": "prioritySupport",
        "planType": "boolean",
        "hasUsageLimit": False,
        "enabledGlobally": False,
    },
    {
        "featureId": "dedicated_account_manager",
        "name": "Dedicated Account Manager",
        "description": "Personal account manager for enterprise support",
        "category": "support",
        "tier": "enterprise",
        "configKey": "dedicatedAccountManager",
        "planKey": "dedicatedAccountManager",
        "planType": "boolean",
        "hasUsageLimit": False,
        "enabledGlobally": False,
    },
]
