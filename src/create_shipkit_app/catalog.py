"""Template and feature catalogs.

Both catalogs are read-only registries built once at import time and
keyed by identifier. Lookups go through the helper functions below;
callers never mutate the registries.
"""

from types import MappingProxyType

from create_shipkit_app.models import FeatureCategory, FeatureConfig, Template

_BASE_DEPENDENCIES = (
    "next",
    "react",
    "react-dom",
    "typescript",
    "@types/node",
    "@types/react",
    "@types/react-dom",
    "tailwindcss",
    "autoprefixer",
    "postcss",
)

_BASE_DEV_DEPENDENCIES = (
    "eslint",
    "eslint-config-next",
    "@typescript-eslint/eslint-plugin",
    "@typescript-eslint/parser",
)

_TEMPLATES = (
    Template(
        name="minimal",
        description="Minimal ShipKit setup with basic features only",
        version="1.0.0",
        features=("auth-nextauth",),
        dependencies=_BASE_DEPENDENCIES,
        dev_dependencies=_BASE_DEV_DEPENDENCIES,
    ),
    Template(
        name="full",
        description="Complete ShipKit setup with all core features",
        version="1.0.0",
        features=(
            "auth-nextauth",
            "database-postgres",
            "email-resend",
            "ui-shadcn",
            "cms-payload",
            "analytics-posthog",
        ),
        dependencies=_BASE_DEPENDENCIES
        + (
            "next-auth",
            "drizzle-orm",
            "drizzle-kit",
            "postgres",
            "@auth/drizzle-adapter",
            "resend",
            "@radix-ui/react-slot",
            "class-variance-authority",
            "clsx",
            "tailwind-merge",
            "lucide-react",
            "payload",
            "@payloadcms/next",
            "@payloadcms/richtext-lexical",
            "posthog-js",
        ),
        dev_dependencies=_BASE_DEV_DEPENDENCIES + ("prettier", "prettier-plugin-tailwindcss"),
        optional_paths={
            FeatureCategory.AUTHENTICATION: ("src/app/(authentication)",),
        },
    ),
)

_FEATURES = (
    # Authentication
    FeatureConfig(
        name="auth-nextauth",
        description="NextAuth.js for authentication",
        category=FeatureCategory.AUTHENTICATION,
        dependencies=("next-auth", "@auth/drizzle-adapter"),
        env_vars=("NEXTAUTH_SECRET", "NEXTAUTH_URL"),
        files=("src/lib/auth.ts", "src/middleware.ts"),
    ),
    FeatureConfig(
        name="auth-stack",
        description="Stack Auth for modern authentication",
        category=FeatureCategory.AUTHENTICATION,
        dependencies=("@stackframe/stack",),
        env_vars=(
            "STACK_PROJECT_ID",
            "STACK_PUBLISHABLE_CLIENT_KEY",
            "STACK_SECRET_SERVER_KEY",
        ),
    ),
    FeatureConfig(
        name="auth-supabase",
        description="Supabase Auth for authentication",
        category=FeatureCategory.AUTHENTICATION,
        dependencies=("@supabase/ssr", "@supabase/supabase-js"),
        env_vars=("NEXT_PUBLIC_SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        files=("src/lib/supabase.ts",),
    ),
    FeatureConfig(
        name="auth-clerk",
        description="Clerk for authentication",
        category=FeatureCategory.AUTHENTICATION,
        dependencies=("@clerk/nextjs",),
        env_vars=("NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY", "CLERK_SECRET_KEY"),
    ),
    # Database
    FeatureConfig(
        name="database-postgres",
        description="PostgreSQL database with Drizzle ORM",
        category=FeatureCategory.DATABASE,
        dependencies=("drizzle-orm", "drizzle-kit", "postgres"),
        env_vars=("DATABASE_URL",),
        files=("drizzle.config.ts", "src/server/db/index.ts"),
    ),
    FeatureConfig(
        name="database-supabase",
        description="Supabase database",
        category=FeatureCategory.DATABASE,
        dependencies=("@supabase/ssr", "@supabase/supabase-js"),
        env_vars=("NEXT_PUBLIC_SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        files=("src/lib/supabase.ts",),
    ),
    # Email
    FeatureConfig(
        name="email-resend",
        description="Resend for email delivery",
        category=FeatureCategory.EMAIL,
        dependencies=("resend", "@react-email/render"),
        env_vars=("RESEND_API_KEY",),
        files=("src/lib/email.ts",),
    ),
    FeatureConfig(
        name="email-sendgrid",
        description="SendGrid for email delivery",
        category=FeatureCategory.EMAIL,
        dependencies=("@sendgrid/mail",),
        env_vars=("SENDGRID_API_KEY",),
    ),
    # Payments
    FeatureConfig(
        name="payments-stripe",
        description="Stripe for payments",
        category=FeatureCategory.PAYMENTS,
        dependencies=("stripe",),
        env_vars=("STRIPE_SECRET_KEY", "NEXT_PUBLIC_STRIPE_PUBLISHABLE_KEY"),
        files=("src/lib/stripe.ts",),
    ),
    FeatureConfig(
        name="payments-lemonsqueezy",
        description="Lemon Squeezy for payments",
        category=FeatureCategory.PAYMENTS,
        dependencies=("@lemonsqueezy/lemonsqueezy.js",),
        env_vars=("LEMONSQUEEZY_API_KEY",),
    ),
    # UI
    FeatureConfig(
        name="ui-shadcn",
        description="Shadcn/UI component library",
        category=FeatureCategory.UI,
        dependencies=(
            "@radix-ui/react-slot",
            "@radix-ui/react-icons",
            "class-variance-authority",
            "clsx",
            "tailwind-merge",
            "lucide-react",
        ),
        files=("components.json", "src/lib/utils.ts"),
    ),
    # CMS
    FeatureConfig(
        name="cms-payload",
        description="Payload CMS for content management",
        category=FeatureCategory.CMS,
        dependencies=(
            "payload",
            "@payloadcms/next",
            "@payloadcms/richtext-lexical",
            "@payloadcms/db-postgres",
        ),
        env_vars=("PAYLOAD_SECRET",),
        files=("payload.config.ts",),
    ),
    FeatureConfig(
        name="cms-builderio",
        description="Builder.io for visual content management",
        category=FeatureCategory.CMS,
        dependencies=("@builder.io/react", "@builder.io/sdk"),
        env_vars=("NEXT_PUBLIC_BUILDER_API_KEY",),
    ),
    # Analytics
    FeatureConfig(
        name="analytics-posthog",
        description="PostHog for product analytics",
        category=FeatureCategory.ANALYTICS,
        dependencies=("posthog-js",),
        env_vars=("NEXT_PUBLIC_POSTHOG_KEY", "NEXT_PUBLIC_POSTHOG_HOST"),
        files=("src/components/posthog-provider.tsx",),
    ),
    FeatureConfig(
        name="analytics-umami",
        description="Umami for web analytics",
        category=FeatureCategory.ANALYTICS,
        env_vars=("NEXT_PUBLIC_UMAMI_WEBSITE_ID", "NEXT_PUBLIC_UMAMI_URL"),
    ),
    # Deployment
    FeatureConfig(
        name="deployment-vercel",
        description="Vercel deployment configuration",
        category=FeatureCategory.DEPLOYMENT,
        dev_dependencies=("vercel",),
        files=("vercel.json",),
    ),
)

TEMPLATES: MappingProxyType = MappingProxyType({t.name: t for t in _TEMPLATES})
FEATURES: MappingProxyType = MappingProxyType({f.name: f for f in _FEATURES})

DEFAULT_TEMPLATE = "full"


def get_available_templates() -> list[Template]:
    return list(TEMPLATES.values())


def get_available_features() -> list[FeatureConfig]:
    return list(FEATURES.values())


def get_template_by_name(name: str) -> Template | None:
    return TEMPLATES.get(name)


def get_feature_by_name(name: str) -> FeatureConfig | None:
    return FEATURES.get(name)


def template_names() -> list[str]:
    return list(TEMPLATES)


def feature_names() -> list[str]:
    return list(FEATURES)
