"""ABOUTME: Guided workflow prompts for common Kinsta tasks.

Each prompt renders a single user message listing the tool calls to make, in order.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .server import KinstaMCPServer


def deploy_site_prompt(site_name: str, region: Optional[str] = None) -> str:
    if region:
        region_line = f"Region: {region}"
        region_step = "Skip (region already chosen)"
    else:
        region_line = "Please help me choose a region."
        region_step = "Use kinsta_company_regions to list available regions and help me choose"

    return (
        "Help me create a new WordPress site on Kinsta.\n\n"
        f"Site name: {site_name}\n"
        f"{region_line}\n\n"
        "Steps:\n"
        f"1. {region_step}\n"
        "2. Use kinsta_sites_create to create the site with sensible defaults\n"
        "3. Use kinsta_operations_status to track the creation progress\n"
        "4. Once complete, use kinsta_sites_get to confirm the site details\n"
        "5. Share the site URL and any next steps (adding a domain, configuring SSL, etc.)"
    )


def manage_backups_prompt(env_id: str) -> str:
    return (
        f"Help me manage backups for environment {env_id}.\n\n"
        "Steps:\n"
        "1. Use kinsta_backups_list to show existing backups\n"
        "2. Ask what I'd like to do:\n"
        "   - Create a new manual backup (kinsta_backups_create)\n"
        "   - Restore from a backup (kinsta_backups_restore - confirm first, this is destructive)\n"
        "   - Download a backup (kinsta_backups_downloadable)\n"
        "   - Delete a backup (kinsta_backups_delete - confirm first)\n"
        "3. Track any operations with kinsta_operations_status"
    )


def push_environment_prompt(site_id: str) -> str:
    return (
        f"Help me push changes between environments for site {site_id}.\n\n"
        "Steps:\n"
        "1. Use kinsta_environments_list to show available environments\n"
        "2. Ask which environment to push FROM and which to push TO\n"
        "3. Ask what to push: database, files, or both\n"
        "4. IMPORTANT: Confirm the push details before proceeding, the target is overwritten\n"
        "5. Suggest backing up the target environment first (kinsta_backups_create)\n"
        "6. Use kinsta_environments_push to execute the push\n"
        "7. Track the operation with kinsta_operations_status"
    )


def setup_domain_prompt(env_id: str, domain: str) -> str:
    return (
        f'Help me set up the domain "{domain}" for environment {env_id}.\n\n'
        "Steps:\n"
        "1. Use kinsta_domains_list to check existing domains\n"
        f'2. Use kinsta_domains_add to add the domain "{domain}"\n'
        "3. Use kinsta_domains_verification to get DNS verification records\n"
        "4. Show me the DNS records I need to add at my registrar\n"
        "5. Once DNS is verified, use kinsta_domains_set_primary if this should be the primary domain\n"
        "6. Remind me about SSL: Kinsta issues certificates automatically via Let's Encrypt"
    )


def register_prompts(server: "KinstaMCPServer") -> None:
    """Register all workflow prompts on the server."""
    mcp = server.get_mcp()

    mcp.prompt(
        name="deploy-site",
        description="Guide through creating a new WordPress site on Kinsta",
    )(deploy_site_prompt)
    mcp.prompt(
        name="manage-backups",
        description="Guide for backup list, create, and restore workflows",
    )(manage_backups_prompt)
    mcp.prompt(
        name="push-environment",
        description="Guide for pushing changes between environments (e.g. staging to live)",
    )(push_environment_prompt)
    mcp.prompt(
        name="setup-domain",
        description="Guide for adding a custom domain to a Kinsta environment",
    )(setup_domain_prompt)
