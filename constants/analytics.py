"""
Analytics Constants

Option names, field names and the fixed pieces of the Google Analytics
tracking snippet.
"""

# Name under which the settings record is stored in the option table
OPTION_NAME = 'google_analytics_settings'

# Settings fields stored strictly as 0/1
BOOLEAN_FIELDS = ('enabled', 'force_ssl', 'anonymize_ip', 'track_admin')

TRACKING_ID_PLACEHOLDER = 'UA-XXXXXXXX-X'

# Identifier used to deduplicate the snippet within one render cycle
SCRIPT_ID = 'google-analytics-script'

# analytics.js bootstrap loader, identical for every configuration
GA_LOADER = """(function(i,s,o,g,r,a,m){i['GoogleAnalyticsObject']=r;i[r]=i[r]||function(){
  (i[r].q=i[r].q||[]).push(arguments)},i[r].l=1*new Date();a=s.createElement(o),
  m=s.getElementsByTagName(o)[0];a.async=1;a.src=g;m.parentNode.insertBefore(a,m)
  })(window,document,'script','//www.google-analytics.com/analytics.js','ga');"""

# Maximum length of an option name
MAX_OPTION_NAME_LENGTH = 64
