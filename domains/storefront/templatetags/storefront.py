from django import template

from domains.storefront.forms import SearchForm

register = template.Library()

CHECKOUT_STEPS = ("Sign-In", "Shipping", "Payment", "Place Order")


@register.inclusion_tag("storefront/checkout_steps.html")
def checkout_steps(step1=False, step2=False, step3=False, step4=False):
    """
    체크아웃 진행 표시
    {% checkout_steps True True %} → Sign-In, Shipping 에 active
    """
    done = (step1, step2, step3, step4)
    return {"steps": [{"label": label, "active": bool(flag)} for label, flag in zip(CHECKOUT_STEPS, done)]}


@register.inclusion_tag("storefront/search_box.html", takes_context=True)
def search_box(context):
    form = context.get("search_form") or SearchForm()
    return {"form": form}
