from django.contrib import admin
from .models import FreelancerProfile, RatePlan, PortfolioItem


class RatePlanInline(admin.TabularInline):
    model = RatePlan
    extra = 0


class PortfolioItemInline(admin.TabularInline):
    model = PortfolioItem
    extra = 0


@admin.register(FreelancerProfile)
class FreelancerProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "category", "approval_status", "reviewed_at", "updated_at")
    list_filter = ("approval_status", "category")
    search_fields = ("user__email", "user__username", "location")
    inlines = [RatePlanInline, PortfolioItemInline]


admin.site.register(RatePlan)
admin.site.register(PortfolioItem)
