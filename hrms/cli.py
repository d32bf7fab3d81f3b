import click
from flask import current_app

from hrms.models import db, Tenant


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed-demo")
    @click.option("--tenant-name", default="Demo Corp", show_default=True)
    @click.option("--admin-email", default="admin@demo.com", show_default=True)
    @click.option("--admin-password", default="admin123", show_default=True)
    def seed_demo(tenant_name, admin_email, admin_password):
        """Create a demo tenant with an admin and one employee."""
        from hrms.auth import services as auth_services
        from hrms.employee import services as employee_services

        db.create_all()
        if Tenant.query.filter_by(name=tenant_name).first():
            click.echo(f"Tenant '{tenant_name}' already exists, nothing to do.")
            return

        tenant, admin, _token = auth_services.setup_tenant_admin({
            "tenantName": tenant_name,
            "adminEmail": admin_email,
            "adminPassword": admin_password,
            "adminFirstName": "Demo",
            "adminLastName": "Admin",
        })
        employee = employee_services.create({
            "firstName": "Jane",
            "lastName": "Doe",
            "email": f"jane.doe@{admin_email.split('@')[-1]}",
            "role": "Software Engineer",
            "department": "Engineering",
            "hireDate": "2024-01-15",
        }, tenant.id)

        current_app.logger.info("Seeded tenant %s", tenant.id)
        click.echo(f"Tenant #{tenant.id} '{tenant.name}' created")
        click.echo(f"  admin:    {admin.email} / {admin_password}")
        click.echo(f"  employee: {employee.email} (#{employee.id})")
