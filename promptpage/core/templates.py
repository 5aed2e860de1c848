"""Jinja sources for each section kind."""

from __future__ import annotations

from typing import Dict

BOLT_PATH = (
    "M11.3 1.046A1 1 0 0112 2v5h4a1 1 0 01.82 1.573l-7 10A1 1 0 018 18v-5H4a1 1 0 01-.82-1.573"
    "l7-10a1 1 0 011.12-.38z"
)

STAR_PATH = (
    "M9.049 2.927c.3-.921 1.603-.921 1.902 0l1.07 3.292a1 1 0 00.95.69h3.462c.969 0 1.371 1.24"
    ".588 1.81l-2.8 2.034a1 1 0 00-.364 1.118l1.07 3.292c.3.921-.755 1.688-1.54 1.118l-2.8-2.034"
    "a1 1 0 00-1.175 0l-2.8 2.034c-.784.57-1.838-.197-1.539-1.118l1.07-3.292a1 1 0 00-.364-1.118"
    "L2.98 8.72c-.783-.57-.38-1.81.588-1.81h3.461a1 1 0 00.951-.69l1.07-3.292z"
)

QUOTE_PATH = (
    "M3 4a1 1 0 011-1h12a1 1 0 110 2H4a1 1 0 01-1-1zm0 4a1 1 0 011-1h12a1 1 0 110 2H4a1 1 0 01-1-1z"
    "m0 4a1 1 0 011-1h12a1 1 0 110 2H4a1 1 0 01-1-1z"
)

HERO_TEMPLATE = """\
<section data-section="hero" class="relative min-h-screen flex items-center justify-center bg-gradient-to-br from-slate-50 via-white to-slate-100 overflow-hidden" style="{{ colors }}">
  <div class="absolute inset-0 bg-grid-slate-100 [mask-image:linear-gradient(0deg,white,rgba(255,255,255,0.6))]"></div>
  <div class="absolute top-0 right-0 -translate-y-12 translate-x-12 w-96 h-96 bg-gradient-to-br from-blue-400/20 to-purple-600/20 rounded-full blur-3xl"></div>
  <div class="absolute bottom-0 left-0 translate-y-12 -translate-x-12 w-96 h-96 bg-gradient-to-tr from-emerald-400/20 to-blue-600/20 rounded-full blur-3xl"></div>
  <div class="relative z-10 max-w-7xl mx-auto px-4 sm:px-6 lg:px-8 text-center">
    <div class="space-y-8 animate-fade-in">
      <div class="inline-flex items-center px-4 py-2 rounded-full bg-gradient-to-r from-blue-50 to-indigo-50 border border-blue-200/50 text-blue-700 text-sm font-medium shadow-sm">
        <svg class="w-4 h-4 mr-2" fill="currentColor" viewBox="0 0 20 20"><path fill-rule="evenodd" d="{{ bolt_path }}" clip-rule="evenodd"/></svg>
        {{ badge }}
      </div>
      <h1 class="text-5xl sm:text-6xl lg:text-7xl font-bold tracking-tight">
        <span class="block text-slate-900">{{ headline }}</span>
        <span class="block bg-gradient-to-r from-blue-600 via-purple-600 to-indigo-600 bg-clip-text text-transparent mt-2">{{ subheadline }}</span>
      </h1>
      <p class="max-w-3xl mx-auto text-xl sm:text-2xl text-slate-600 leading-relaxed">{{ description }}</p>
      <div class="flex flex-col sm:flex-row gap-4 justify-center items-center pt-8">
        <button class="group relative px-8 py-4 bg-gradient-to-r from-blue-600 to-indigo-600 text-white font-semibold rounded-2xl shadow-lg hover:shadow-xl transform hover:-translate-y-0.5 transition-all duration-200 min-w-[200px]">
          <span class="relative z-10">{{ primary_cta }}</span>
        </button>
        <button class="px-8 py-4 bg-white text-slate-700 font-semibold rounded-2xl border-2 border-slate-200 hover:border-slate-300 hover:bg-slate-50 transition-all duration-200 min-w-[200px]">{{ secondary_cta }}</button>
      </div>
      <div class="pt-12 flex flex-col items-center space-y-4">
        <p class="text-sm text-slate-500 font-medium">Trusted by {{ social_proof }} customers worldwide</p>
        <div class="flex items-center space-x-8 opacity-60">
          {%- for _ in range(4) %}
          <div class="h-8 w-24 bg-slate-300 rounded"></div>
          {%- endfor %}
        </div>
      </div>
    </div>
  </div>
</section>
"""

FEATURES_TEMPLATE = """\
<section data-section="features" class="py-24 bg-white relative overflow-hidden" style="{{ colors }}">
  <div class="absolute inset-0 bg-gradient-to-b from-slate-50/50 to-white"></div>
  <div class="relative z-10 max-w-7xl mx-auto px-4 sm:px-6 lg:px-8">
    <div class="text-center mb-20">
      <h2 class="text-4xl sm:text-5xl font-bold text-slate-900 mb-6">{{ title }}</h2>
      <p class="text-xl text-slate-600 max-w-3xl mx-auto leading-relaxed">{{ subtitle }}</p>
    </div>
    <div class="grid md:grid-cols-2 lg:grid-cols-3 gap-8">
      {%- for feature in items %}
      <div class="group relative p-8 bg-white rounded-3xl border border-slate-200/60 hover:border-slate-300/60 hover:shadow-xl transition-all duration-300 transform hover:-translate-y-1">
        <div class="w-14 h-14 bg-gradient-to-br from-blue-500 to-indigo-600 rounded-2xl flex items-center justify-center mb-6 group-hover:scale-110 transition-transform duration-300">
          <svg class="w-7 h-7 text-white" fill="currentColor" viewBox="0 0 20 20"><path fill-rule="evenodd" d="{{ bolt_path }}" clip-rule="evenodd"/></svg>
        </div>
        <h3 class="text-xl font-bold text-slate-900 mb-3">{{ feature.title }}</h3>
        <p class="text-slate-600 leading-relaxed">{{ feature.description }}</p>
      </div>
      {%- endfor %}
    </div>
  </div>
</section>
"""

TESTIMONIALS_TEMPLATE = """\
<section data-section="testimonials" class="py-24 bg-gradient-to-br from-slate-50 to-slate-100 relative overflow-hidden" style="{{ colors }}">
  <div class="absolute top-0 left-1/4 w-96 h-96 bg-gradient-to-br from-blue-400/10 to-purple-600/10 rounded-full blur-3xl"></div>
  <div class="relative z-10 max-w-7xl mx-auto px-4 sm:px-6 lg:px-8">
    <div class="text-center mb-20">
      <h2 class="text-4xl sm:text-5xl font-bold text-slate-900 mb-6">{{ title }}</h2>
      <p class="text-xl text-slate-600 max-w-3xl mx-auto">{{ subtitle }}</p>
    </div>
    <div class="grid md:grid-cols-2 lg:grid-cols-3 gap-8">
      {%- for testimonial in items %}
      <div class="relative p-8 bg-white rounded-3xl shadow-sm hover:shadow-lg transition-all duration-300 transform hover:-translate-y-1">
        <div class="absolute -top-4 left-8">
          <div class="w-8 h-8 bg-gradient-to-br from-blue-500 to-indigo-600 rounded-full flex items-center justify-center">
            <svg class="w-4 h-4 text-white" fill="currentColor" viewBox="0 0 20 20"><path fill-rule="evenodd" d="{{ quote_path }}" clip-rule="evenodd"/></svg>
          </div>
        </div>
        <div class="flex space-x-1 mb-4 pt-4">
          {%- for _ in range(5) %}
          <svg class="w-5 h-5 text-yellow-400" fill="currentColor" viewBox="0 0 20 20"><path d="{{ star_path }}"/></svg>
          {%- endfor %}
        </div>
        <p class="text-slate-700 mb-6 leading-relaxed">"{{ testimonial.text }}"</p>
        <div class="flex items-center">
          <div class="w-12 h-12 bg-gradient-to-br from-slate-200 to-slate-300 rounded-full mr-4"></div>
          <div>
            <p class="font-semibold text-slate-900">{{ testimonial.author }}</p>
            <p class="text-sm text-slate-500">{{ testimonial.role }}</p>
          </div>
        </div>
      </div>
      {%- endfor %}
    </div>
  </div>
</section>
"""

FAQ_TEMPLATE = """\
<section data-section="faq" class="py-24 bg-white" style="{{ colors }}">
  <div class="max-w-4xl mx-auto px-4 sm:px-6 lg:px-8">
    <div class="text-center mb-16">
      <h2 class="text-4xl sm:text-5xl font-bold text-slate-900 mb-6">{{ title }}</h2>
      <p class="text-xl text-slate-600">{{ subtitle }}</p>
    </div>
    <div class="space-y-4">
      {%- for faq in items %}
      <details class="group border border-slate-200 rounded-2xl overflow-hidden hover:border-slate-300 transition-colors duration-200">
        <summary class="w-full px-8 py-6 text-left flex items-center justify-between bg-white hover:bg-slate-50 transition-colors duration-200 cursor-pointer">
          <h3 class="text-lg font-semibold text-slate-900 pr-8">{{ faq.question }}</h3>
          <span class="flex-shrink-0 w-6 h-6 bg-gradient-to-br from-blue-500 to-indigo-600 rounded-full flex items-center justify-center">
            <svg class="w-4 h-4 text-white transform group-open:rotate-45 transition-transform duration-200" fill="none" stroke="currentColor" viewBox="0 0 24 24"><path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M12 6v6m0 0v6m0-6h6m-6 0H6"/></svg>
          </span>
        </summary>
        <div class="px-8 pb-6 text-slate-600 leading-relaxed">{{ faq.answer }}</div>
      </details>
      {%- endfor %}
    </div>
  </div>
</section>
"""

CTA_TEMPLATE = """\
<section data-section="cta" class="py-24 bg-gradient-to-br from-slate-900 via-blue-900 to-indigo-900 relative overflow-hidden" style="{{ colors }}">
  <div class="absolute inset-0 bg-grid-white-05 [mask-image:linear-gradient(0deg,white,rgba(255,255,255,0.6))]"></div>
  <div class="absolute top-0 right-0 -translate-y-12 translate-x-12 w-96 h-96 bg-gradient-to-br from-blue-400/20 to-purple-600/20 rounded-full blur-3xl"></div>
  <div class="relative z-10 max-w-4xl mx-auto px-4 sm:px-6 lg:px-8 text-center">
    <div class="space-y-8">
      <h2 class="text-4xl sm:text-5xl lg:text-6xl font-bold text-white leading-tight">{{ headline }}</h2>
      <p class="text-xl sm:text-2xl text-blue-100 max-w-3xl mx-auto leading-relaxed">{{ description }}</p>
      <div class="flex flex-col sm:flex-row gap-4 justify-center items-center pt-8">
        <button class="group relative px-8 py-4 bg-white text-slate-900 font-semibold rounded-2xl shadow-lg hover:shadow-xl transform hover:-translate-y-0.5 transition-all duration-200 min-w-[200px]">
          <span class="relative z-10">{{ primary_cta }}</span>
        </button>
        <button class="px-8 py-4 bg-transparent text-white font-semibold rounded-2xl border-2 border-white/30 hover:border-white/50 hover:bg-white/10 transition-all duration-200 min-w-[200px]">{{ secondary_cta }}</button>
      </div>
      <div class="pt-12 flex flex-col items-center space-y-4">
        <p class="text-sm text-blue-200">No credit card required • Cancel anytime • 30-day money-back guarantee</p>
      </div>
    </div>
  </div>
</section>
"""

GENERIC_TEMPLATE = """\
<section data-section="generic" class="py-16 px-4" style="{{ colors }}">
  <div class="max-w-4xl mx-auto text-center">
    <h2 class="text-3xl font-bold mb-4">{{ title }}</h2>
    <div class="text-gray-600">{{ dump }}</div>
  </div>
</section>
"""

SECTION_TEMPLATES: Dict[str, str] = {
    "hero.html": HERO_TEMPLATE,
    "features.html": FEATURES_TEMPLATE,
    "testimonials.html": TESTIMONIALS_TEMPLATE,
    "faq.html": FAQ_TEMPLATE,
    "cta.html": CTA_TEMPLATE,
    "generic.html": GENERIC_TEMPLATE,
}
