from stepper.domain.models import Article, Escalation, Fallback, ReasonCategory, Step

# ==============================================================================
# EMAIL
# ==============================================================================

# --- ARTICLE 1: GMAIL DELIVERY ---
gmail_not_sending = Article(
    id="1",
    title="Email Not Sending - Gmail",
    tags=["email", "gmail", "delivery"],
    product="Gmail",
    version="2024",
    summary="Troubleshoot Gmail email delivery issues",
    keywords=["gmail", "not sending", "delivery", "smtp"],
    prechecks=[
        "Verify the internet connection is active",
        "Check that Gmail opens in a browser",
    ],
    steps=[
        Step(
            id="step1",
            type="check",
            text="Check the outbox for stuck emails",
            expected_result="Outbox is empty or lists the pending emails",
        ),
        Step(
            id="step2",
            type="check",
            text="Verify SMTP server and port number match the required settings",
            expected_result="SMTP server is smtp.gmail.com and port is 587",
        ),
        Step(
            id="step3",
            type="check",
            text="Check the app password is configured when 2FA is on",
            expected_result="An app password exists and is valid",
        ),
        Step(
            id="step4",
            type="action",
            text="Send a short test email to your own address",
            expected_result="The email arrives within a minute",
        ),
        Step(
            id="step5",
            type="check",
            text="Check Google Account security settings for blocked sign-ins",
            expected_result="No recent blocked sign-in attempts",
        ),
    ],
    fallbacks=[
        Fallback(
            id="fallback1",
            condition="SMTP settings are rejected or keep reverting",
            reason_category=ReasonCategory.SYSTEM_ERROR,
            trigger_keywords=["smtp", "settings", "configuration", "port"],
            steps=[
                Step(
                    id="fb1-step1",
                    type="action",
                    text="Reset the SMTP server to smtp.gmail.com and set the port to 587",
                    expected_result="SMTP server and port show the default values",
                ),
                Step(
                    id="fb1-step2",
                    type="action",
                    text="Restart the email client and send the test email again",
                    expected_result="The client restarts and the test email is delivered",
                ),
            ],
        ),
    ],
    stop_conditions=[
        "Emails are sending successfully again",
        "The issue needs Gmail support",
    ],
    escalation=Escalation(
        when="All steps completed without resolution",
        target="Gmail Tier 2 Support",
    ),
)

# --- ARTICLE 2: OUTLOOK DELIVERY (shares its opening step with Gmail) ---
outlook_not_sending = Article(
    id="2",
    title="Email Not Sending - Outlook",
    tags=["email", "outlook", "delivery"],
    product="Outlook",
    summary="Troubleshoot Outlook email delivery issues",
    keywords=["outlook", "not sending", "quota"],
    prechecks=[
        "Check internet connectivity",
        "Verify Outlook is running",
    ],
    steps=[
        Step(id="step1", type="check", text="Check the outbox for stuck emails"),
        Step(
            id="step2",
            type="check",
            text="Verify the account is online and not in offline mode",
            expected_result="The status bar shows Connected",
        ),
        Step(
            id="step3",
            type="check",
            text="Check the mailbox size is below its quota",
            expected_result="Mailbox usage is below 95%",
        ),
        Step(id="step4", type="action", text="Send a short test email to your own address"),
    ],
    fallbacks=[
        Fallback(
            id="fallback1",
            condition="The mailbox is over its quota",
            reason_category=ReasonCategory.SYSTEM_ERROR,
            trigger_keywords=["quota", "mailbox", "full", "space"],
            steps=[
                Step(id="fb1-step1", type="action", text="Archive old emails to free up space"),
                Step(id="fb1-step2", type="action", text="Empty the deleted items folder"),
            ],
        ),
        Fallback(
            id="fallback2",
            condition="Outlook stays in offline mode",
            reason_category=ReasonCategory.NO_CHANGE,
            trigger_keywords=["offline", "online", "connection", "mode"],
            steps=[
                Step(id="fb2-step1", type="action", text="Restart Outlook in safe mode"),
                Step(id="fb2-step2", type="action", text="Create a new Outlook profile"),
            ],
        ),
    ],
    stop_conditions=[
        "Email sends successfully",
        "Mailbox quota issue confirmed",
    ],
    escalation=Escalation(
        when="Quota exceeded and the user cannot delete emails",
        target="IT Admin",
    ),
)

# ==============================================================================
# NETWORK (articles 3 and 4 share their first three steps)
# ==============================================================================

windows_network_lost = Article(
    id="3",
    title="Network Connection Lost - Windows",
    tags=["network", "windows", "connectivity"],
    product="Windows",
    version="10/11",
    summary="Restore network connectivity on Windows",
    keywords=["network", "connection", "wifi", "ethernet"],
    prechecks=[
        "Check whether other devices can connect",
        "Verify the router lights look normal",
    ],
    steps=[
        Step(id="step1", type="check", text="Check airplane mode is turned off"),
        Step(id="step2", type="check", text="Verify the WiFi adapter is enabled in network settings"),
        Step(id="step3", type="action", text="Restart the router and modem and wait 30 seconds"),
        Step(id="step4", type="action", text="Run the Windows network troubleshooter"),
        Step(id="step5", type="action", text="Try connecting to the network again"),
    ],
    fallbacks=[
        Fallback(
            id="fallback1",
            condition="Restarting the adapter changes nothing",
            reason_category=ReasonCategory.NO_CHANGE,
            trigger_keywords=["adapter", "driver", "network", "restart"],
            steps=[
                Step(id="fb1-step1", type="action", text="Uninstall and reinstall the network adapter driver"),
            ],
        ),
    ],
    stop_conditions=[
        "Network connection restored",
        "Hardware failure suspected",
    ],
    escalation=Escalation(
        when="Suspected hardware or ISP issue",
        target="Network Specialist",
    ),
)

mac_network_lost = Article(
    id="4",
    title="Network Connection Lost - Mac",
    tags=["network", "mac", "connectivity"],
    product="MacOS",
    summary="Restore network connectivity on a Mac",
    keywords=["network", "connection", "wifi", "mac"],
    prechecks=[
        "Check whether other devices can connect",
        "Verify the router lights look normal",
    ],
    steps=[
        Step(id="step1", type="check", text="Check airplane mode is turned off"),
        Step(id="step2", type="check", text="Verify WiFi is enabled from the menu bar"),
        Step(id="step3", type="action", text="Restart the router and modem and wait 30 seconds"),
        Step(id="step4", type="action", text="Forget the network and reconnect to it"),
        Step(id="step5", type="action", text="Restart the Mac"),
    ],
    fallbacks=[
        Fallback(
            id="fallback1",
            condition="Network preferences do not help",
            reason_category=ReasonCategory.NO_CHANGE,
            trigger_keywords=["wifi", "preferences", "network", "settings"],
            steps=[
                Step(id="fb1-step1", type="action", text="Restart the router and modem and wait 30 seconds"),
                Step(id="fb1-step2", type="action", text="Reset the SMC"),
                Step(id="fb1-step3", type="action", text="Reset NVRAM"),
            ],
        ),
        Fallback(
            id="fallback2",
            condition="A change asks for permissions the user lacks",
            reason_category=ReasonCategory.PERMISSION_ISSUE,
            trigger_keywords=["permission", "access", "admin", "password"],
            steps=[
                Step(id="fb2-step1", type="check", text="Verify the admin account credentials"),
                Step(id="fb2-step2", type="action", text="Boot into recovery mode and repair permissions"),
            ],
        ),
    ],
    stop_conditions=[
        "Network connection restored",
        "Hardware failure suspected",
    ],
    escalation=Escalation(
        when="Resetting network preferences does not help",
        target="Apple Support",
    ),
)

# ==============================================================================
# SOFTWARE & HARDWARE
# ==============================================================================

install_fails = Article(
    id="5",
    title="Software Installation Fails",
    tags=["installation", "software"],
    product="General",
    summary="Resolve common software installation failures",
    keywords=["install", "installation", "fails"],
    prechecks=[
        "Verify at least 1GB of free disk space",
        "Check the user has admin rights",
    ],
    steps=[
        Step(id="step1", type="check", text="Check available disk space"),
        Step(id="step2", type="check", text="Verify antivirus is not blocking the installer"),
        Step(id="step3", type="action", text="Run the installer as Administrator"),
        Step(id="step4", type="action", text="Retry the installation with logging enabled"),
    ],
    fallbacks=[],
    stop_conditions=[
        "Installation succeeds",
        "A specific error needs vendor support",
    ],
    escalation=Escalation(
        when="Installation keeps failing after all steps",
        target="Software Vendor Support",
    ),
)

printer_offline = Article(
    id="6",
    title="Printer Shows Offline",
    tags=["printer", "printing", "offline"],
    product="HP LaserJet",
    summary="Bring an offline network printer back online",
    keywords=["printer", "offline", "print queue"],
    steps=[
        Step(id="step1", type="check", text="Check the printer is powered on and shows no errors"),
        Step(id="step2", type="action", text="Clear all jobs from the print queue"),
        Step(id="step3", type="action", text="Remove and re-add the printer"),
    ],
    fallbacks=[
        Fallback(
            id="fallback1",
            condition="The print queue option cannot be found",
            reason_category=ReasonCategory.CANT_FIND_OPTION,
            trigger_keywords=["queue", "menu", "option", "settings"],
            steps=[
                Step(id="fb1-step1", type="action", text="Restart the print spooler service"),
                Step(id="fb1-step2", type="action", text="Print a test page from the printer panel"),
            ],
        ),
    ],
    stop_conditions=["A test page prints"],
    escalation=Escalation(
        when="Printer stays offline after re-adding it",
        target="Desktop Support",
    ),
)

SAMPLE_ARTICLES = [
    gmail_not_sending,
    outlook_not_sending,
    windows_network_lost,
    mac_network_lost,
    install_fails,
    printer_offline,
]
