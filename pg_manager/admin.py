from django.contrib import admin

# Customize admin site
admin.site.site_header = "PG Management - Admin Panel"
admin.site.site_title = "PG Management Admin"
admin.site.index_title = "Rooms, tenants and billing"
